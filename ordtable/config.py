"""
Configuration of ordered maps.

The configuration is a mapping, typically read from a YAML file by calling
`read_config`. All keys are optional:

:``deletion_signal``:
    Controls which values ``OrderedMap.set`` treats as a request to remove
    the key. ``none`` (the default) only removes the key when the value is
    ``None``. ``falsy`` removes the key for any value that is false in a
    boolean context (``None``, ``False``, ``0``, ``""``, empty containers).
    ``explicit`` never removes a key through ``set``, so that ``None`` can be
    stored like any other value; keys are then only removed by ``delete`` or
    ``del``.

Unknown keys are rejected, so that a misspelled option does not go
unnoticed.
"""

import collections.abc
import dataclasses
import enum
import logging
import pathlib
import typing

import yaml

# Logger used by this module.
logger = logging.getLogger(__name__)

_KNOWN_KEYS = ("deletion_signal",)


@enum.unique
class DeletionSignal(enum.Enum):
    """
    Policy deciding which values passed to ``OrderedMap.set`` remove a key.
    """

    NONE = "none"
    """
    Only ``None`` removes a key.
    """

    FALSY = "falsy"
    """
    Every value that is false in a boolean context removes a key.
    """

    EXPLICIT = "explicit"
    """
    No value removes a key. Keys are only removed explicitly.
    """

    def signals_deletion(self, value: typing.Any) -> bool:
        """
        Tell whether assigning ``value`` removes a key under this policy.
        """
        if self is DeletionSignal.NONE:
            return value is None
        if self is DeletionSignal.FALSY:
            return not value
        return False


@dataclasses.dataclass(frozen=True)
class TableOptions:
    """
    Options controlling the behavior of an ``OrderedMap``.
    """

    deletion_signal: DeletionSignal = DeletionSignal.NONE


def read_config(
    config_file: typing.Union[str, pathlib.PurePath]
) -> typing.Mapping[str, typing.Any]:
    """
    Read a configuration file.

    If the configuration file cannot be read (because it does not exist,
    permissions are insufficient, or it is not a valid YAML file), an exception
    is raised. An empty file results in an empty configuration.

    :param config_file:
        path to the YAML file.
    :return:
        configuration read from the file.
    """
    with open(config_file, mode="r", encoding="utf-8") as f:
        config = yaml.safe_load(f)
    if config is None:
        config = {}
    _check_mapping(config)
    return config


def table_options(config: typing.Mapping[str, typing.Any]) -> TableOptions:
    """
    Create the table options for a configuration mapping.

    :param config:
        configuration mapping. Please refer to the
        `module documentation <ordtable.config>` for the supported options.
    :return:
        options for constructing an ``OrderedMap``.
    """
    _check_mapping(config)
    for key in config:
        if key not in _KNOWN_KEYS:
            raise ValueError('Unknown configuration option "%s".' % key)
    deletion_signal = config.get("deletion_signal", DeletionSignal.NONE.value)
    if isinstance(deletion_signal, DeletionSignal):
        pass
    elif isinstance(deletion_signal, str):
        try:
            deletion_signal = DeletionSignal(deletion_signal.lower())
        except ValueError:
            raise ValueError(
                'Invalid deletion_signal "%s". Must be one of explicit, '
                "falsy, none." % deletion_signal
            ) from None
    else:
        raise TypeError(
            "Expected a string for the deletion_signal key, but found an "
            "object of type '%s'." % type(deletion_signal).__name__
        )
    logger.debug("Using deletion signal %s.", deletion_signal.value)
    return TableOptions(deletion_signal=deletion_signal)


def _check_mapping(config) -> None:
    if not isinstance(config, collections.abc.Mapping):
        raise TypeError(
            "Configuration object must be a mapping, but got an object of type "
            "'%s'." % type(config).__name__
        )
