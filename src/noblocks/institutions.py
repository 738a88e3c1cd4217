"""Payout institutions (banks and mobile money providers)."""

from typing import Optional, Sequence

from pydantic import BaseModel, ConfigDict


class Institution(BaseModel):
    """A payout institution."""

    model_config = ConfigDict(frozen=True)

    name: str
    code: str
    type: str


KENYA_MOBILE_MONEY_OPTIONS: tuple[Institution, ...] = (
    Institution(name="SAFARICOM (MPESA)", code="MPESA", type="mobile-money"),
    Institution(name="AIRTEL", code="AIRTEL", type="mobile-money"),
)


def get_institution_name_by_code(
    code: str,
    institutions: Sequence[Institution],
) -> Optional[str]:
    """Get the name of the institution with the given code, if any."""
    for institution in institutions:
        if institution.code == code:
            return institution.name
    return None
