"""Exceptions raised by the viscosity model and the data generators."""


class ViscosityError(ValueError):
    """Base class for all errors raised by extrusionviscosity."""


class DomainError(ViscosityError):
    """Input outside the domain of the model (e.g. shear rate <= 0, NaN, inf)."""


class ConfigurationError(ViscosityError):
    """Malformed sampling bounds, steps or configuration file."""
