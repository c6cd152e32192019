from __future__ import annotations


class AppError(Exception):
    """Base relay client error."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail)


class InvalidArgumentError(AppError):
    pass


class MalformedResponseError(AppError):
    pass


class GraphQLResponseError(AppError):
    """The server answered with a GraphQL `errors` list."""

    def __init__(self, messages: list[str]) -> None:
        self.messages = messages
        super().__init__("; ".join(messages) or "GraphQL error")
