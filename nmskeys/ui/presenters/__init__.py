"""Presenters for the binding browser."""

from .binding_browser_presenter import BindingBrowserPresenter

__all__ = ["BindingBrowserPresenter"]
