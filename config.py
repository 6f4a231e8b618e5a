from settings_service import SettingsService

# =============================================================================
# View Configuration Constants
# =============================================================================

# Grid view is shown on the very first launch, before any preference is saved
DEFAULT_SHOWING_GRID = True

# Image file extensions looked up for a mission image key, in order
IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg")


def get_settings_service() -> SettingsService:
    return SettingsService()
