class IconocolorError(Exception):
    """Base class for errors raised by iconocolor."""
    pass


class ProfileNotFoundError(IconocolorError):
    """No settings profile with the requested id."""

    def __init__(self, profile_id: str):
        super().__init__(f"Profile not found: {profile_id}")
        self.profile_id = profile_id


class SettingsFileError(IconocolorError):
    """The plugin settings file exists but cannot be used."""

    def __init__(self, path, reason: str):
        super().__init__(f"Unusable plugin settings in {path}: {reason}")
        self.path = path
        self.reason = reason
