"""Static table of SP-API models to generate clients for.

Each entry names the upstream model file, where it lives under the
selling-partner-api-models repo, and which Go package it becomes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .naming import package_name

REMOTE_MODEL_REPO = (
    "https://raw.githubusercontent.com/amzn/selling-partner-api-models/refs/heads/main/models"
)


@dataclass(frozen=True)
class ModelDescriptor:
    """One upstream spec and the Go package generated from it."""

    json: str
    remote_path: str
    package_folder: str

    @property
    def package(self) -> str:
        return package_name(self.package_folder)


API_MODELS: tuple[ModelDescriptor, ...] = (
    ModelDescriptor(
        json="fulfillmentInbound_2024-03-20.json",
        remote_path="fulfillment-inbound-api-model/fulfillmentInbound_2024-03-20.json",
        package_folder="internal/amazon/fba_inbound",
    ),
    ModelDescriptor(
        json="fbaInventory.json",
        remote_path="fba-inventory-api-model/fbaInventory.json",
        package_folder="internal/amazon/fba_inventory",
    ),
    ModelDescriptor(
        json="catalogItems_2022-04-01.json",
        remote_path="catalog-items-api-model/catalogItems_2022-04-01.json",
        package_folder="internal/amazon/catalog",
    ),
    ModelDescriptor(
        json="listingsItems_2021-08-01.json",
        remote_path="listings-items-api-model/listingsItems_2021-08-01.json",
        package_folder="internal/amazon/listings",
    ),
    ModelDescriptor(
        json="definitionsProductTypes_2020-09-01.json",
        remote_path="product-type-definitions-api-model/definitionsProductTypes_2020-09-01.json",
        package_folder="internal/amazon/product_type_definitions",
    ),
    ModelDescriptor(
        json="feeds_2021-06-30.json",
        remote_path="feeds-api-model/feeds_2021-06-30.json",
        package_folder="internal/amazon/feeds",
    ),
)


def validate_registry(models: Iterable[ModelDescriptor]) -> None:
    """Reject entries that would produce unusable paths or package names."""
    seen: dict[str, str] = {}
    for model in models:
        for field_name in ("json", "remote_path", "package_folder"):
            if not getattr(model, field_name):
                raise ValueError(f"Model entry {model!r} has an empty {field_name}")
        name = model.package
        if name in seen:
            raise ValueError(
                f"Package name {name!r} is used by both {seen[name]} and {model.json}"
            )
        seen[name] = model.json
