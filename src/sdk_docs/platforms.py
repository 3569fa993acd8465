"""SDK platforms and how they map onto spec audiences and example paths."""

from enum import Enum


class Platform(str, Enum):
    CLIENT_WEB = "client-web"
    CLIENT_FLUTTER = "client-flutter"
    CLIENT_APPLE = "client-apple"
    CLIENT_ANDROID_KOTLIN = "client-android-kotlin"
    CLIENT_ANDROID_JAVA = "client-android-java"
    CLIENT_GRAPHQL = "client-graphql"
    CLIENT_REST = "client-rest"
    CLIENT_REACT_NATIVE = "client-react-native"

    SERVER_DART = "server-dart"
    SERVER_DENO = "server-deno"
    SERVER_DOTNET = "server-dotnet"
    SERVER_NODEJS = "server-nodejs"
    SERVER_PHP = "server-php"
    SERVER_PYTHON = "server-python"
    SERVER_RUBY = "server-ruby"
    SERVER_SWIFT = "server-swift"
    SERVER_KOTLIN = "server-kotlin"
    SERVER_JAVA = "server-java"
    SERVER_GRAPHQL = "server-graphql"
    SERVER_REST = "server-rest"


# Both Android flavours share one demo tree, split by language
ANDROID_EXAMPLES_DIR = "client-android"
ANDROID_LANGUAGES = {
    Platform.CLIENT_ANDROID_JAVA.value: "java",
    Platform.CLIENT_ANDROID_KOTLIN.value: "kotlin",
}


def platform_id(platform: str | Platform) -> str:
    """Plain identifier of a platform, accepting enum members or raw strings."""
    if isinstance(platform, Platform):
        return platform.value
    return platform


def get_audience(platform: str | Platform) -> str:
    """Return the spec audience for a platform: 'server', 'client' or 'console'."""
    platform = platform_id(platform)
    if platform.startswith("server-"):
        return "server"
    if platform.startswith("client-"):
        return "client"
    return "console"


def is_android(platform: str) -> bool:
    return platform_id(platform) in ANDROID_LANGUAGES


def example_path(version: str, platform: str, demo: str) -> str:
    """Build the example snippet key for a method demo file.

    Android:  ``{version}/client-android/{java|kotlin}/{demo}``
    Others:   ``{version}/{platform}/examples/{demo}``
    """
    platform = platform_id(platform)
    language = ANDROID_LANGUAGES.get(platform)
    if language:
        return f"{version}/{ANDROID_EXAMPLES_DIR}/{language}/{demo}"
    return f"{version}/{platform}/examples/{demo}"
