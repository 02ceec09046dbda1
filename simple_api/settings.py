import os
import copy
import yaml

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
SETTINGS_FILE = os.environ.get(
    "STUDENT_API_SETTINGS",
    os.path.join(os.path.dirname(__file__), "settings.yaml"),
)

DEFAULT_SETTINGS = {
    'host': '0.0.0.0',
    'port': 5000,
    'username': 'toto',
    'password': 'python',
    'student_age_file': os.path.join('simple_api', 'student_age.json'),
    'debug': False,
}

# setting name -> (environment variable, converter)
ENV_OVERRIDES = {
    'host': ('STUDENT_API_HOST', str),
    'port': ('STUDENT_API_PORT', int),
    'username': ('STUDENT_API_USERNAME', str),
    'password': ('STUDENT_API_PASSWORD', str),
    'student_age_file': ('STUDENT_AGE_FILE_PATH', str),
    'debug': ('STUDENT_API_DEBUG', lambda v: v.lower() == 'true'),
}


def load_api_settings(settings_file=None, environ=None):
    """
    Build the Data Service settings.

    Defaults are overlaid by the ``api`` section of the YAML settings file
    (when the file exists), then by environment variables.
    """
    settings_file = settings_file or SETTINGS_FILE
    environ = os.environ if environ is None else environ
    settings = copy.deepcopy(DEFAULT_SETTINGS)

    if os.path.exists(settings_file):
        with open(settings_file, encoding='utf-8') as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Settings file {settings_file} must contain a mapping")
        section = loaded.get('api', loaded)
        if not isinstance(section, dict):
            raise ValueError(f"'api' section of {settings_file} must be a mapping")
        settings.update({k: v for k, v in section.items() if k in DEFAULT_SETTINGS})

    for key, (var, convert) in ENV_OVERRIDES.items():
        if environ.get(var):
            settings[key] = convert(environ[var])

    settings['port'] = int(settings['port'])
    if not os.path.isabs(settings['student_age_file']):
        settings['student_age_file'] = os.path.join(ROOT_DIR, settings['student_age_file'])
    return settings
