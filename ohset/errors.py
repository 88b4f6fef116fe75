class OpenHashSetError(Exception):
    pass


class InvalidArgumentError(OpenHashSetError, ValueError):
    pass


class IteratorExhaustedError(OpenHashSetError, StopIteration):
    pass


class InvalidIteratorStateError(OpenHashSetError, RuntimeError):
    pass
