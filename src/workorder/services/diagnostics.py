from __future__ import annotations

from typing import Any

from workorder.core.normalize import NormalizedOrder, RawExtractionResult
from workorder.errors import ValidationError


def analyze_extraction(raw: RawExtractionResult, normalized: NormalizedOrder | None) -> dict[str, Any]:
    return {
        "customerDataFound": bool(raw.customer_name or raw.company or raw.customer_email),
        "lineItemsFound": sum(1 for item in raw.line_items if item.description),
        "addressFound": bool(raw.shipping_address.address1),
        "contactInfoFound": bool(raw.customer_email or raw.customer_phone),
        "productionNotesFound": bool(raw.production_notes),
        "readyForImport": normalized is not None,
    }


def build_recommendations(
    analysis: dict[str, Any],
    validation_error: ValidationError | None = None,
) -> list[dict[str, str]]:
    recommendations: list[dict[str, str]] = []

    if not analysis["customerDataFound"]:
        recommendations.append(
            {
                "type": "error",
                "message": "No customer name, company or email found. Add a selector for the customer block.",
            }
        )
    if not analysis["lineItemsFound"]:
        recommendations.append(
            {
                "type": "error",
                "message": "No line items found. Check the line item table or block selectors.",
            }
        )
    if not analysis["addressFound"]:
        recommendations.append(
            {
                "type": "warning",
                "message": "Shipping address not found; the customer will be created without an address.",
            }
        )
    if not analysis["contactInfoFound"]:
        recommendations.append(
            {
                "type": "warning",
                "message": "No email or phone found for the customer.",
            }
        )
    if not analysis["productionNotesFound"]:
        recommendations.append(
            {
                "type": "info",
                "message": "No production notes found; a default note referencing the workorder will be used.",
            }
        )

    if validation_error is not None:
        recommendations.append({"type": "error", "message": f"Validation failed: {validation_error}"})
    elif analysis["readyForImport"]:
        recommendations.append({"type": "success", "message": "Workorder is ready to import."})

    return recommendations
