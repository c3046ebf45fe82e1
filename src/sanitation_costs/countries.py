"""
===========================================================
countries.py
Last Updated: 2026-10-17
===========================================================

Description:
    Least Developed Countries (LDCs) and high-priority
    developing nations for sanitation interventions, with
    ISO-3166 alpha-2 codes and local currency codes.
-----------------------------------------------------------
License: MIT
===========================================================
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Country:
    code: str
    name: str
    currency: str


SUPPORTED_COUNTRIES = (
    Country('AF', 'Afghanistan', 'AFN'),
    Country('AO', 'Angola', 'AOA'),
    Country('BD', 'Bangladesh', 'BDT'),
    Country('BJ', 'Benin', 'XOF'),
    Country('BF', 'Burkina Faso', 'XOF'),
    Country('BI', 'Burundi', 'BIF'),
    Country('KH', 'Cambodia', 'KHR'),
    Country('CF', 'Central African Republic', 'XAF'),
    Country('TD', 'Chad', 'XAF'),
    Country('CD', 'Dem. Rep. Congo', 'CDF'),
    Country('DJ', 'Djibouti', 'DJF'),
    Country('ER', 'Eritrea', 'ERN'),
    Country('ET', 'Ethiopia', 'ETB'),
    Country('GM', 'Gambia', 'GMD'),
    Country('GN', 'Guinea', 'GNF'),
    Country('GW', 'Guinea-Bissau', 'XOF'),
    Country('HT', 'Haiti', 'HTG'),
    Country('LA', 'Laos', 'LAK'),
    Country('LS', 'Lesotho', 'LSL'),
    Country('LR', 'Liberia', 'LRD'),
    Country('MG', 'Madagascar', 'MGA'),
    Country('MW', 'Malawi', 'MWK'),
    Country('ML', 'Mali', 'XOF'),
    Country('MR', 'Mauritania', 'MRU'),
    Country('MZ', 'Mozambique', 'MZN'),
    Country('MM', 'Myanmar', 'MMK'),
    Country('NP', 'Nepal', 'NPR'),
    Country('NE', 'Niger', 'XOF'),
    Country('RW', 'Rwanda', 'RWF'),
    Country('SN', 'Senegal', 'XOF'),
    Country('SL', 'Sierra Leone', 'SLE'),
    Country('SO', 'Somalia', 'SOS'),
    Country('SS', 'South Sudan', 'SSP'),
    Country('SD', 'Sudan', 'SDG'),
    Country('TZ', 'Tanzania', 'TZS'),
    Country('TL', 'Timor-Leste', 'USD'),
    Country('TG', 'Togo', 'XOF'),
    Country('UG', 'Uganda', 'UGX'),
    Country('YE', 'Yemen', 'YER'),
    Country('ZM', 'Zambia', 'ZMW'),
)


def get_country(code: str) -> Optional[Country]:
    code = code.upper()
    for country in SUPPORTED_COUNTRIES:
        if country.code == code:
            return country
    return None
