from zip_entry_count.eocd import number_of_entries

__version__ = "0.1.0"

__all__ = ["number_of_entries", "__version__"]
