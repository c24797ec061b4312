"""
Pydantic schemas for prop firms and their account offerings.

A firm profile carries display attributes, firm‑wide trading rules, a
list of purchasable account types and a free‑form list of extra
key/value rules.  ``avg_rating`` and ``rating_count`` only exist on
the read model: they are derived from the firm's reviews and any
client supplied values are dropped on input.

Account types form a tagged union on the ``accountType`` field.  Both
variants share pricing and risk fields; ``evaluation`` accounts add
the challenge target and stage, ``instant`` accounts are funded
straight away.
"""

from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from ..services.pricing import derive_discounted_price

# Camel case on the wire, snake case in Python.  ``populate_by_name``
# lets services and tests build models with the Python names.
CAMEL_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
}


class ExtraField(BaseModel):
    """One firm‑specific rule that has no dedicated field."""

    key: str = Field(..., min_length=1, examples=["Weekend holding"])
    value: str = Field(..., min_length=1, examples=["Allowed on swing accounts"])


class AccountTypeBase(BaseModel):
    """Fields shared by every account offering."""

    account_size: int = Field(..., gt=0, examples=[50000])
    drawdown_type: Literal["EOD", "EOT", "TMDD"] = Field(..., examples=["EOD"])
    price: float = Field(..., ge=0, examples=[100])
    current_discount_rate: float = Field(0, ge=0, le=100, examples=[25])
    # Always overwritten from ``price`` and ``current_discount_rate``.
    discounted_price: float = 0
    activation_fee: float = Field(0, ge=0)
    mll: float = Field(0, ge=0, alias="MLL", description="Maximum loss limit")
    dll: float = Field(0, ge=0, alias="DLL", description="Daily loss limit")
    payout_ratio: float = Field(0, ge=0, le=100)
    payout_frequency: str = Field("", examples=["weekly"])
    referral_code: Optional[str] = None
    news_trading_allowed: bool = False
    dca_allowed: bool = Field(False, alias="DCAAllowed")
    copy_trading_allowed: bool = False
    algo_trading_allowed: bool = False
    scaling_plan: bool = False
    reset_allowed: bool = False
    reset_price: Optional[float] = Field(None, ge=0)

    model_config = CAMEL_CONFIG

    @model_validator(mode="after")
    def apply_discount(self) -> "AccountTypeBase":
        self.discounted_price = derive_discounted_price(self.price, self.current_discount_rate)
        return self


class EvaluationAccount(AccountTypeBase):
    """An account that must pass a profit‑target challenge first."""

    account_type: Literal["evaluation"]
    stage: int = Field(1, ge=1)
    target_profit: float = Field(0, ge=0, examples=[3000])
    min_evaluation_days: int = Field(0, ge=0)


class InstantAccount(AccountTypeBase):
    """An account funded immediately on purchase."""

    account_type: Literal["instant"]
    min_funded_days: int = Field(0, ge=0)
    max_withdrawal: Optional[float] = Field(None, ge=0)


AccountType = Annotated[
    Union[EvaluationAccount, InstantAccount],
    Field(discriminator="account_type"),
]


def _extra_from_mapping(value: Any) -> Any:
    """Accept the legacy ``{"key": value}`` object form of ``extra``.

    Older clients sent extra rules as a JSON object; it is converted to
    the ordered list of pairs, keeping the object's key order.
    """
    if isinstance(value, dict):
        return [{"key": str(k), "value": str(v)} for k, v in value.items()]
    return value


class FirmBase(BaseModel):
    name: str = Field(..., min_length=2, examples=["FTMO"])
    logo: Optional[str] = None
    background_image: Optional[str] = None
    description: str = Field(..., min_length=1)
    website_url: Optional[str] = Field(None, examples=["https://ftmo.com"])
    min_payout_time: Optional[int] = Field(None, ge=0)
    payout_window: Optional[str] = None
    profit_split: Optional[float] = Field(None, ge=0, le=100)
    challenge_fee_min: Optional[float] = Field(None, ge=0)
    challenge_fee_max: Optional[float] = Field(None, ge=0)
    payout_time: Optional[int] = Field(None, ge=0)
    max_account_size: Optional[int] = Field(None, ge=0)
    max_daily_drawdown: Optional[float] = Field(None, ge=0)
    max_total_drawdown: Optional[float] = Field(None, ge=0)
    min_trading_days: Optional[int] = Field(None, ge=0)
    scaling_plan: bool = False
    trading_platforms: List[str] = Field(default_factory=list)
    tradable_assets: List[str] = Field(default_factory=list)
    evaluation_stages: List[str] = Field(default_factory=list)
    news_trading_allowed: bool = False
    dca_allowed: bool = Field(False, alias="DCAAllowed")
    max_trailing_allowed: bool = False
    micro_scalping_allowed: bool = False
    copy_trading_allowed: bool = False
    max_accounts_per_trader: Optional[int] = Field(None, ge=0)
    max_contracts_per_trade: Optional[int] = Field(None, ge=0)
    consistency_eval: Optional[float] = Field(None, ge=0, le=100)
    consistency_funded: Optional[float] = Field(None, ge=0, le=100)
    featured: bool = False
    account_types: List[AccountType] = Field(default_factory=list)
    extra: List[ExtraField] = Field(default_factory=list)

    model_config = CAMEL_CONFIG

    @field_validator("extra", mode="before")
    @classmethod
    def normalize_extra(cls, v: Any) -> Any:
        return _extra_from_mapping(v)


class FirmCreate(FirmBase):
    """Schema for creating a firm.

    ``id``, ``avgRating`` and ``ratingCount`` are not part of the
    schema; if a client sends them they are ignored.
    """
    pass


class FirmUpdate(BaseModel):
    """Schema for updating a firm.

    All fields are optional and only provided fields are merged onto
    the stored record.  ``null`` clears the optional profile fields and
    is ignored for fields a firm always has.  Replacing
    ``accountTypes`` replaces the whole list.
    """

    name: Optional[str] = Field(None, min_length=2)
    logo: Optional[str] = None
    background_image: Optional[str] = None
    description: Optional[str] = Field(None, min_length=1)
    website_url: Optional[str] = None
    min_payout_time: Optional[int] = Field(None, ge=0)
    payout_window: Optional[str] = None
    profit_split: Optional[float] = Field(None, ge=0, le=100)
    challenge_fee_min: Optional[float] = Field(None, ge=0)
    challenge_fee_max: Optional[float] = Field(None, ge=0)
    payout_time: Optional[int] = Field(None, ge=0)
    max_account_size: Optional[int] = Field(None, ge=0)
    max_daily_drawdown: Optional[float] = Field(None, ge=0)
    max_total_drawdown: Optional[float] = Field(None, ge=0)
    min_trading_days: Optional[int] = Field(None, ge=0)
    scaling_plan: Optional[bool] = None
    trading_platforms: Optional[List[str]] = None
    tradable_assets: Optional[List[str]] = None
    evaluation_stages: Optional[List[str]] = None
    news_trading_allowed: Optional[bool] = None
    dca_allowed: Optional[bool] = Field(None, alias="DCAAllowed")
    max_trailing_allowed: Optional[bool] = None
    micro_scalping_allowed: Optional[bool] = None
    copy_trading_allowed: Optional[bool] = None
    max_accounts_per_trader: Optional[int] = Field(None, ge=0)
    max_contracts_per_trade: Optional[int] = Field(None, ge=0)
    consistency_eval: Optional[float] = Field(None, ge=0, le=100)
    consistency_funded: Optional[float] = Field(None, ge=0, le=100)
    featured: Optional[bool] = None
    account_types: Optional[List[AccountType]] = None
    extra: Optional[List[ExtraField]] = None

    model_config = CAMEL_CONFIG

    @field_validator("extra", mode="before")
    @classmethod
    def normalize_extra(cls, v: Any) -> Any:
        return _extra_from_mapping(v)


class FirmRead(FirmBase):
    """Schema for reading a firm from the API."""

    id: int
    avg_rating: float = 0
    rating_count: int = 0
