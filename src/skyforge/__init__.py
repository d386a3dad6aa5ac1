import warnings

# The compute client emits interpreter-deprecation FutureWarnings on import,
# which land in the middle of the provisioning status spinner.
for _module in ("google.api_core", "google.cloud", "google.auth"):
    warnings.filterwarnings("ignore", category=FutureWarning, module=_module)
