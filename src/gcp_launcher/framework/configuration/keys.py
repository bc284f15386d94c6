"""
Well-known configuration keys of the Google plugin.
"""

# Name of the optional override document inside the configuration directory.
GOOGLE_CONFIG_FILENAME = "google.conf"

# Resource holding the shipped defaults, relative to gcp_launcher.resources.
BASE_CONFIG_PACKAGE = "gcp_launcher.resources"
BASE_CONFIG_RESOURCE = "google.conf"

COMPUTE_SECTION = "google.compute."

# Append the alias name: IMAGE_ALIASES_SECTION + "centos6"
IMAGE_ALIASES_SECTION = COMPUTE_SECTION + "imageAliases."

COMPUTE_POLLING_TIMEOUT_KEY = COMPUTE_SECTION + "pollingTimeoutSeconds"
COMPUTE_MAX_POLLING_INTERVAL_KEY = COMPUTE_SECTION + "maxPollingIntervalSeconds"
