def format_dict_key_to_camel_case(dict_key: str) -> str:
    return "".join(word if idx == 0 else word.capitalize() for idx, word in enumerate(dict_key.split("_")))


def split_comma_separated(value: str | None) -> list[str] | None:
    if not value:
        return None
    items = [item.strip() for item in value.split(",") if item.strip()]
    return items or None
