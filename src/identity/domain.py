"""Identity bounded context: customers and their spending balance."""

from protean.domain import Domain

identity = Domain(name="identity")
