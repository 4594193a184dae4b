from typing import Any


def query_all(table: Any, **kwargs: Any) -> list[dict]:
    """Query を LastEvaluatedKey がなくなるまで繰り返し、全アイテムを返す"""
    items: list[dict] = []
    while True:
        response = table.query(**kwargs)
        items.extend(response.get("Items", []))
        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            return items
        kwargs["ExclusiveStartKey"] = last_key


def scan_all(table: Any, **kwargs: Any) -> list[dict]:
    """Scan を LastEvaluatedKey がなくなるまで繰り返し、全アイテムを返す"""
    items: list[dict] = []
    while True:
        response = table.scan(**kwargs)
        items.extend(response.get("Items", []))
        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            return items
        kwargs["ExclusiveStartKey"] = last_key
