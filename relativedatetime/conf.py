from datetime import datetime
from functools import wraps

_DEFAULT_SETTINGS = {
    "RELATIVE_BASE": None,
    "RETURN_AS_TIMEZONE_AWARE": False,
}


class Settings:
    """Control and configure default evaluation behavior of relativedatetime.
    Currently, supported settings are:

    * `RELATIVE_BASE`
    * `RETURN_AS_TIMEZONE_AWARE`
    """

    _default = True
    _mod_settings = dict()

    def __init__(self, settings=None):
        if settings:
            self._updateall(settings.items())
        else:
            self._updateall(_DEFAULT_SETTINGS.items())

    def _updateall(self, iterable):
        for key, value in iterable:
            setattr(self, key, value)

    def replace(self, mod_settings=None, **kwds):
        for k, v in kwds.items():
            if v is None:
                raise TypeError('Invalid {{"{}": {}}}'.format(k, v))

        for x in _DEFAULT_SETTINGS.keys():
            kwds.setdefault(x, getattr(self, x))

        kwds["_default"] = False
        if mod_settings:
            kwds["_mod_settings"] = mod_settings

        return self.__class__(settings=kwds)


settings = Settings()


def apply_settings(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        mod_settings = kwargs.get("settings")
        kwargs["settings"] = mod_settings or settings

        if isinstance(kwargs["settings"], dict):
            kwargs["settings"] = settings.replace(
                mod_settings=mod_settings, **kwargs["settings"]
            )

        if not isinstance(kwargs["settings"], Settings):
            raise TypeError(
                "settings can only be either dict or instance of Settings class"
            )

        check_settings(kwargs["settings"])
        return f(*args, **kwargs)

    return wrapper


class SettingValidationError(ValueError):
    pass


def check_settings(settings):
    settings_values = {
        "RELATIVE_BASE": {"type": datetime},
        "RETURN_AS_TIMEZONE_AWARE": {"type": bool},
    }

    modified_settings = settings._mod_settings  # check only modified settings

    for setting in modified_settings:
        if setting not in settings_values:
            raise SettingValidationError('"{}" is not a valid setting'.format(setting))

    for setting_name, setting_value in modified_settings.items():
        setting_type = settings_values[setting_name]["type"]

        if not isinstance(setting_value, setting_type):
            raise SettingValidationError(
                '"{}" must be "{}", not "{}".'.format(
                    setting_name, setting_type.__name__, type(setting_value).__name__
                )
            )
