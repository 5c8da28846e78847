"""Map Point Mapper.

Turns loosely formatted, WKT-like text pasted by a user into ordered
sequences of latitude/longitude coordinates that can be drawn on a map
as polylines, and computes the region needed to frame them.
"""

__version__ = "0.1.0"
