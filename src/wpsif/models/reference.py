"""Reference data for Qatari WPS submissions."""

from __future__ import annotations

from pydantic import BaseModel


class Bank(BaseModel):
    code: str  # Bank short identifier (BSI)
    name: str


QATAR_BANKS: list[Bank] = [
    Bank(code="ABQ", name="Al Ahli Bank"),
    Bank(code="ARB", name="Arab Bank"),
    Bank(code="BBQ", name="Barwa Bank"),
    Bank(code="BNP", name="BNP Paribas"),
    Bank(code="CBQ", name="Commercial Bank of Qatar"),
    Bank(code="DBQ", name="Doha Bank"),
    Bank(code="HSB", name="HSBC Bank Middle East"),
    Bank(code="IBQ", name="International Bank of Qatar"),
    Bank(code="IIB", name="Qatar International Islamic Bank"),
    Bank(code="KCB", name="Al Khaliji Bank"),
    Bank(code="MAR", name="Masref Al Rayyan Bank"),
    Bank(code="MSQ", name="Mashreq Bank"),
    Bank(code="QDB", name="Qatar Development Bank"),
    Bank(code="QIB", name="Qatar Islamic Bank"),
    Bank(code="QNB", name="Qatar National Bank"),
    Bank(code="SCB", name="Standard Chartered Bank"),
    Bank(code="UBL", name="United Bank Ltd"),
]
