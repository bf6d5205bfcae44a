"""Lane types, lane specifications, placement parsing, sidewalk inference and lane editing for OpenStreetMap roads."""

__version__ = "0.1.0"