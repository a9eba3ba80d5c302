"""Client version.

Bump rules:
- Patch (0.1.x): bug fixes, message tweaks
- Minor (0.x.0): new options, new settings
- Major (x.0.0): API contract changes
"""

CLIENT_VERSION = "0.1.0"
