# This file makes the 'service' directory a Python sub-package
# within the 'code_connect' service.
#
# It contains the generator core: name normalization, intrinsic
# rendering, props generation (inferred and explicit) and the
# emission of the Code Connect file itself.
