from __future__ import annotations

k_boltzmann          : float    = 1.380649e-23                                   # J/K
c_light              : float    = 2.99792458e8                                   # m/s
c_light_cgs          : float    = c_light * 1.0E+2                               # cm/s
h_planck             : float    = 6.62607015e-34                                 # J s

hz_to_k              : float    = h_planck / k_boltzmann                         # K / Hz
cm_to_k              : float    = hz_to_k * c_light_cgs                          # K / cm^{-1}
mhz_to_hz            : float    = 1.0E+6                                         # Hz / MHz
