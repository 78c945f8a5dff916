# This file makes the 'utils' directory a Python sub-package
# within the 'code_connect' service.
#
# It contains the collaborators around the generator core:
# - Path resolution for the output file and component imports
# - The source formatter (Prettier) used before writing files
