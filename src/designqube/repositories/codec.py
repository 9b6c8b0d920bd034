from __future__ import annotations

import json
from typing import Iterable, Optional

from designqube.domain.models import Product, Sale, finite_float


class CodecError(ValueError):
    pass


def _text(value) -> str:
    return "" if value is None else str(value)


def _opt_text(value) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _number(record: dict, key: str) -> float:
    # absent or null means zero; anything else must parse to a finite number
    value = record.get(key)
    if value is None or value == "":
        return 0.0
    try:
        return finite_float(value)
    except (TypeError, ValueError) as e:
        raise CodecError(f"{key} must be numeric. Received: {value!r}") from e


def _records(blob: str) -> list[dict]:
    try:
        data = json.loads(blob)
    except json.JSONDecodeError as e:
        raise CodecError(f"Invalid JSON: {e}") from e
    if data is None:
        return []
    if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
        raise CodecError("Expected a JSON array of objects.")
    return data


def product_to_dict(p: Product) -> dict:
    return {
        "serial": p.serial,
        "type": p.type,
        "brand": p.brand,
        "name": p.name,
        "size": p.size,
        "numBoxes": p.num_boxes,
        "numPieces": p.num_pieces,
        "pricePerBox": p.price_per_box,
        "stock": p.stock,
    }


def product_from_dict(r: dict) -> Product:
    serial = _text(r.get("serial")).strip()
    if not serial:
        raise CodecError("Product serial is required.")
    try:
        return Product(
            serial=serial,
            name=_text(r.get("name")),
            type=_opt_text(r.get("type")),
            brand=_text(r.get("brand")),
            size=_opt_text(r.get("size")),
            num_boxes=int(_number(r, "numBoxes")),
            num_pieces=int(_number(r, "numPieces")),
            price_per_box=_number(r, "pricePerBox"),
            stock=int(_number(r, "stock")),
        )
    except (ValueError, OverflowError) as e:
        raise CodecError(str(e)) from e


def sale_to_dict(s: Sale) -> dict:
    return {
        "serial": s.serial,
        "name": s.name,
        "quantity": s.quantity,
        "total": s.total,
        "date": s.date,
        "type": s.type,
    }


def sale_from_dict(r: dict) -> Sale:
    try:
        return Sale(
            serial=_text(r.get("serial")),
            name=_text(r.get("name")),
            type=_opt_text(r.get("type")),
            quantity=int(_number(r, "quantity")),
            total=_number(r, "total"),
            date=_text(r.get("date")),
        )
    except (ValueError, OverflowError) as e:
        raise CodecError(str(e)) from e


def encode_products(products: Iterable[Product]) -> str:
    return json.dumps([product_to_dict(p) for p in products], ensure_ascii=False)


def decode_products(blob: str) -> list[Product]:
    return [product_from_dict(r) for r in _records(blob)]


def encode_sales(sales: Iterable[Sale]) -> str:
    return json.dumps([sale_to_dict(s) for s in sales], ensure_ascii=False)


def decode_sales(blob: str) -> list[Sale]:
    return [sale_from_dict(r) for r in _records(blob)]
