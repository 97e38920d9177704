from pydantic import BaseModel

from .dtos import OrderSummary


class OrderPricing(BaseModel):
    """Prices excl. VAT used to quote the signup order"""

    startup_fee: float
    extra_plate_price: float
    monthly_fee: float
    max_extra_plates: int = 99

    @classmethod
    def from_config(cls, config) -> "OrderPricing":
        return cls(
            startup_fee=config.STARTUP_FEE_EXCL_VAT,
            extra_plate_price=config.EXTRA_PLATE_PRICE_EXCL_VAT,
            monthly_fee=config.MONTHLY_FEE_EXCL_VAT,
            max_extra_plates=config.EXTRA_PLATES_MAX,
        )

    def quote(self, extra_plates_qty: int) -> OrderSummary:
        total = self.startup_fee + extra_plates_qty * self.extra_plate_price
        return OrderSummary(
            startup_fee_excl_vat=self.startup_fee,
            extra_plates_qty=extra_plates_qty,
            extra_plate_price_excl_vat=self.extra_plate_price,
            total_today_excl_vat=round(total, 2),
            monthly_excl_vat=self.monthly_fee,
        )
