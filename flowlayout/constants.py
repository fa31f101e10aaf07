from flowlayout.core.Alignment import Alignment

# Distance between adjacent items when neither a fixed spacing nor a
# per-pair preference is available
DEFAULT_SPACING = 8.0

# Contents margin of the Qt layout, in pixels
DEFAULT_MARGIN = 0

DEFAULT_ALIGNMENT = Alignment.CENTER
