"""User-facing titles and messages shared by the CLI and GUI."""

from __future__ import annotations

from .models import SetupOutcome


TITLE = "Google Play Games - Android Configuration"
SUCCESS_TITLE = "Success"
ERROR_TITLE = "Error"
OK_LABEL = "OK"
SETUP_BUTTON = "Setup"
CANCEL_BUTTON = "Cancel"

BLURB = (
    "To configure Google Play Games in this project, go to the Play Games "
    "console, copy the Android resource definitions for your game and paste "
    "them below."
)
CLASS_NAME_TITLE = "Constants class name"
CLASS_NAME_BLURB = "Enter the fully qualified name of the class to create containing the constants"
RESOURCES_TITLE = "Resources Definition"
RESOURCES_BLURB = "Paste in the Android Resources from the Play Console"
CLIENT_ID_TITLE = "Web App Client ID (Optional)"
CLIENT_ID_LABEL = "Client ID"
CLIENT_ID_BLURB = (
    "The web app client ID is needed to access the user's ID token and call "
    "other APIs on behalf of the user. It is not required for Game Services."
)

SETUP_COMPLETE = "Google Play Games configured successfully."
MALFORMED_INPUT = (
    "Invalid or missing XML resource data.  Make sure the data is valid and "
    "contains the app_id element"
)
CLIENT_ID_ERROR = (
    "The client ID does not appear to be valid. It should start with the "
    "numeric application ID followed by a dash, for example "
    "123456789012-abc.apps.googleusercontent.com."
)
APP_ID_ERROR = "The App ID does not appear to be valid. It must consist solely of digits, usually 10 or more."
NEARBY_ERROR = "The Nearby Connections service ID is not valid, setup was not completed."
SDK_NOT_FOUND_TITLE = "Android SDK Not found"
SDK_NOT_FOUND = (
    "The Android SDK path was not found. Please configure it in the setup "
    "configuration or set ANDROID_HOME."
)

OUTCOME_MESSAGES = {
    SetupOutcome.SUCCESS: SETUP_COMPLETE,
    SetupOutcome.MALFORMED_INPUT: MALFORMED_INPUT,
    SetupOutcome.INVALID_CLIENT_ID: CLIENT_ID_ERROR,
    SetupOutcome.INVALID_APP_ID: APP_ID_ERROR,
    SetupOutcome.DELEGATE_FAILURE: NEARBY_ERROR,
    SetupOutcome.MISSING_TOOLCHAIN: SDK_NOT_FOUND,
}

OUTCOME_TITLES = {
    SetupOutcome.SUCCESS: SUCCESS_TITLE,
    SetupOutcome.MISSING_TOOLCHAIN: SDK_NOT_FOUND_TITLE,
}


def message_for(outcome: SetupOutcome) -> str:
    return OUTCOME_MESSAGES[outcome]


def title_for(outcome: SetupOutcome) -> str:
    return OUTCOME_TITLES.get(outcome, ERROR_TITLE)
