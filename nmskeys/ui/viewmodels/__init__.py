"""ViewModels for the binding browser."""

from .binding_list_vm import BindingListVM

__all__ = ["BindingListVM"]
