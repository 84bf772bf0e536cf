class ErdifyError(Exception):
    pass


class InvalidColumnError(ErdifyError, ValueError):
    pass


class CatalogUnavailableError(ErdifyError, LookupError):
    pass


class UnsupportedAdapterError(ErdifyError, ValueError):
    pass


class UnsupportedColumnTypeError(ErdifyError, ValueError):
    pass


class DuplicateModelError(ErdifyError, ValueError):
    pass


class UnknownModelError(ErdifyError, KeyError):
    pass
