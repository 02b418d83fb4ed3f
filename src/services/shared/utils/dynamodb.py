def query_all(table, **kwargs) -> list[dict]:
    """LastEvaluatedKey を辿って Query の結果をすべて取得する"""
    items: list[dict] = []
    while True:
        response = table.query(**kwargs)
        items.extend(response.get("Items", []))
        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            return items
        kwargs["ExclusiveStartKey"] = last_key
