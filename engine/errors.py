# engine/errors.py

class EngineError(Exception):
    pass


class InvalidInputError(EngineError, ValueError):
    pass
