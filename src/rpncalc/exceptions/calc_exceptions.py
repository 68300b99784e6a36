class EvalError(Exception):
    pass


class InvalidToken(EvalError):
    def __init__(self, text):
        super().__init__(f"bad token {text}")
        self.text = text


class MismatchedParentheses(EvalError):
    def __init__(self):
        super().__init__("mismatched parentheses")


class BadExpression(EvalError):
    def __init__(self):
        super().__init__("bad input expression")


class DivisionByZero(EvalError, ZeroDivisionError):
    def __init__(self):
        super().__init__("division by zero")
