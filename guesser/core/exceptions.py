class GuessException(Exception):
    pass


class InputReadError(GuessException):
    pass


class InvalidGuess(GuessException):
    def __init__(self, *args, text: str = ""):
        self.text = text
        super(InvalidGuess, self).__init__(*args)


class SessionFinished(GuessException):
    pass
