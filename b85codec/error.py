class B85Error(Exception):
    pass


class DecodeError(B85Error, ValueError):
    pass


class InvalidSymbol(DecodeError):
    def __init__(self, symbol: str, position: int):
        super().__init__(f"invalid symbol {symbol!r} at position {position}")
        self.symbol = symbol
        self.position = position


class InvalidLength(DecodeError):
    def __init__(self, count: int):
        super().__init__(
            f"invalid length: {count} symbols leaves a single trailing symbol"
        )
        self.count = count


class Overflow(DecodeError):
    def __init__(self, position: int, value: int):
        super().__init__(f"group starting at position {position} exceeds 32 bits")
        self.position = position
        self.value = value
