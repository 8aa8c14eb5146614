"""
Yojana Eligibility Backend

Registers citizens and matches them against the government scheme
catalog on registration, login and on demand.
"""

__version__ = "1.0.0"
__author__ = "Yojana Team"
__description__ = "Citizen registration and scheme eligibility matching service"
