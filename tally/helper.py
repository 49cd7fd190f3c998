from tally.errors import InvalidCharacter, LexError, ParseError


def error_message(expression: str, location: int, message: str) -> str:
    messages = [f"{expression}\n", f"{' ' * location}^ {message}\n"]
    return "".join(messages)


def render_error(expression: str, error: LexError | ParseError) -> str:
    match error:
        case InvalidCharacter(position=position):
            return error_message(expression, position, error.describe())
        case _:
            return f"{expression}\n{error.describe()}\n"
