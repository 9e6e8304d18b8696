"""Customer details generator for demo orders."""

from __future__ import annotations

from typing import Iterator

from estate_market.generators.base import BaseGenerator
from estate_market.models import CustomerDetails


class CustomerDetailsGenerator(BaseGenerator):
    """Generate synthetic buyer details for checkout."""

    def generate(self) -> CustomerDetails:
        """Generate a single set of customer details.

        Returns
        -------
        CustomerDetails
            Generated details.
        """
        return CustomerDetails(
            name=self.fake.name(),
            email=self.fake.email(),
            phone=self.fake.phone_number(),
            address=self.fake.address().replace("\n", ", "),
        )

    def generate_batch(self, count: int) -> Iterator[CustomerDetails]:
        """Generate multiple customer details.

        Parameters
        ----------
        count : int
            Number of records to generate.

        Yields
        ------
        CustomerDetails
            Generated details.
        """
        for _ in range(count):
            yield self.generate()

    def user_id(self) -> str:
        """A synthetic user id."""
        return f"user-{self.fake.uuid4()[:8]}"
