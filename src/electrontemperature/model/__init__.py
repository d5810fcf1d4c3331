from electrontemperature.model.cross_sections import CrossSectionProvider, CrossSectionTable, truncate

__all__ = ["CrossSectionProvider", "CrossSectionTable", "truncate"]
