# This file makes the 'models' directory a Python sub-package
# within the 'code_connect' service.
#
# It contains the Pydantic models for the create request/response
# payloads, the design component description and the intrinsic
# binding kinds.
