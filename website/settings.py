import os
import copy
import yaml

SETTINGS_FILE = os.environ.get(
    "WEBSITE_SETTINGS",
    os.path.join(os.path.dirname(__file__), "settings.yaml"),
)

DEFAULT_SETTINGS = {
    'host': '0.0.0.0',
    'port': 8080,
    'api_url': 'http://localhost:5000/pozos/api/v1.0/get_student_ages',
    'username': 'toto',
    'password': 'python',
    'timeout': 5,
}

ENV_OVERRIDES = {
    'host': ('WEBSITE_HOST', str),
    'port': ('WEBSITE_PORT', int),
    'api_url': ('STUDENT_API_URL', str),
    'username': ('STUDENT_API_USERNAME', str),
    'password': ('STUDENT_API_PASSWORD', str),
    'timeout': ('WEBSITE_TIMEOUT', float),
}


def load_website_settings(settings_file=None, environ=None):
    """Defaults, then the ``website`` section of settings.yaml, then the environment."""
    settings_file = settings_file or SETTINGS_FILE
    environ = os.environ if environ is None else environ
    settings = copy.deepcopy(DEFAULT_SETTINGS)

    if os.path.exists(settings_file):
        with open(settings_file, encoding='utf-8') as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Settings file {settings_file} must contain a mapping")
        section = loaded.get('website', loaded)
        if not isinstance(section, dict):
            raise ValueError(f"'website' section of {settings_file} must be a mapping")
        settings.update({k: v for k, v in section.items() if k in DEFAULT_SETTINGS})

    for key, (var, convert) in ENV_OVERRIDES.items():
        if environ.get(var):
            settings[key] = convert(environ[var])

    settings['port'] = int(settings['port'])
    settings['timeout'] = float(settings['timeout'])
    return settings
