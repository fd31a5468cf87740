from kappa.types.blocks import Block, TextBlock, ImageBlock
from kappa.types.delivery import Delivery, Order
from kappa.types.scope_handle import ScopeHandle

__all__ = ["Block", "TextBlock", "ImageBlock", "Delivery", "Order", "ScopeHandle"]
