# No dependencies
import numpy as np

# Index of the alpha value inside the parentheses of rgba()/hsla()
ALPHA_FIELD = 3

HUE_360 = 360
PERCENT_MAX = 100
CHANNEL_MAX = 255
ALPHA_OPAQUE = 1.0

# Channel math runs in single precision
channel_dtype = np.float32
