from strawberry.relay import to_base64


def gid(type_name: str, pk) -> str:
    return to_base64(type_name, pk)


def error_messages(res) -> list[str]:
    return [e["message"] for e in res.errors or []]
