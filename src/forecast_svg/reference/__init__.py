"""Static display constants.

Reference data that doesn't change with API calls: the WMO weather-code
emoji table and the per-weekday speech bubble widths used by the SVG layout.

Adding a new module:
1. Create ``reference/{name}.py`` with constants
2. Re-export from this ``__init__.py``
"""

from forecast_svg.reference.emoji import UNKNOWN_EMOJI as UNKNOWN_EMOJI
from forecast_svg.reference.emoji import WMO_EMOJI as WMO_EMOJI
from forecast_svg.reference.layout import DAY_BUBBLE_WIDTHS as DAY_BUBBLE_WIDTHS
from forecast_svg.reference.layout import DEFAULT_BUBBLE_WIDTH as DEFAULT_BUBBLE_WIDTH
from forecast_svg.reference.layout import PS_ANCHOR_DATE as PS_ANCHOR_DATE
