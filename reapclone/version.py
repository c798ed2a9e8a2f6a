__version__ = "0.3.0"

# The GitHub API refuses requests without a User-Agent.
USER_AGENT = f"reapclone/{__version__}"
