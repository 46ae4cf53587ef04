from .schemas import ProblemDetail


class BowlingError(Exception):
    """Base class for bowling game errors."""

    def __init__(
        self,
        title: str,
        *,
        code: str,
        detail: str | None = None,
        type_: str = "about:blank",
    ) -> None:
        super().__init__(detail or title)
        self.title = title
        self.detail = detail
        self.type = type_
        self.code = code

    def to_problem(self, instance: str | None = None) -> ProblemDetail:
        return ProblemDetail(
            type=self.type,
            title=self.title,
            detail=self.detail,
            instance=instance,
            code=self.code,
        )


class InvalidRoll(BowlingError, ValueError):
    def __init__(self, detail: str) -> None:
        super().__init__(
            title="Invalid roll",
            detail=detail,
            code="invalid_roll",
        )


class GameOver(BowlingError):
    def __init__(self, detail: str = "game is already over") -> None:
        super().__init__(
            title="Game over",
            detail=detail,
            code="game_over",
        )
