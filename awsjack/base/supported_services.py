from typing import Literal


existing_services = Literal[
    "application_autoscaling",
    "datasync",
    "eks",
    "kendra",
    "license_manager",
    "organizations",
    "robomaker",
    "sso_admin",
]
