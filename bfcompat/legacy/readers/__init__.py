"""Built-in legacy readers

Import order is the default reader order.
"""
from . import fake, npy, hdf5, fabioreader
