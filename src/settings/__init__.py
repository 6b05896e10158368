from src.settings.models import Setting

__all__ = ["Setting"]
