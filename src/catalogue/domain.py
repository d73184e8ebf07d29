"""Catalogue bounded context: purchasable products and their stock levels."""

from protean.domain import Domain

catalogue = Domain(name="catalogue")
