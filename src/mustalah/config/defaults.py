"""Default configuration constants for Mustalah.

Field defaults for index generation and the GitHub source live on the
``GlossaryConfig`` / ``GitHubSourceConfig`` models; this module holds the
values that are not part of the configuration schema.
"""

# Project config files looked up in the working directory, in order
CONFIG_FILENAMES = ("mustalah.yml", "mustalah.yaml")

ENV_PREFIX = "MUSTALAH_"

GITHUB_RAW_BASE_URL = "https://raw.githubusercontent.com"
