"""Formula modules for solar geometry and irradiance.

Modules
-------
iso52010
    Solar position after ISO 52010-1 (native sign conventions).
duffie
    Solar position after Duffie & Beckman.
geometry
    Incidence angle, air mass, beam ratio and profile angle.
perez
    Perez sky model: direct, circumsolar, sky diffuse and ground-reflected components.
clearsky
    Hottel clear-sky model and Erbs diffuse fractions.
"""
