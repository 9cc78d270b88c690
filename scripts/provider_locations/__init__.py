"""Azure resource providers and locations function.

Lists the subscription's resource providers from Azure Resource Manager,
following pagination, and cross-indexes them into providers-by-location
and locations-by-provider views served over an HTTP trigger.
"""
