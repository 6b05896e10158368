from src.exchange.schemas import (
    CategoryExportInfo,
    ExchangePayload,
    ImportSummary,
    WordExportInfo,
)

__all__ = [
    "CategoryExportInfo",
    "ExchangePayload",
    "ImportSummary",
    "WordExportInfo",
]
