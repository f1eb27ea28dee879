class RateSourceException(Exception):
	pass


class ProviderError(RateSourceException):
	pass


class CacheError(RateSourceException):
	pass


class ProviderUnavailableError(ProviderError):
	pass
