"""Pure-Python descriptions of HDF5 datatypes, strings, arrays, shapes, error stacks and enumerations."""

__version__ = "0.7.0"
__all__ = ["array", "dim", "errors", "string", "h5type", "type_enums", "library_enums"]