"""Generally useful utility functions."""

import os
import warnings


def get_setting_from_environ(environ_var, params_types):
    """extract settings from environment variable

    Parameters
    ----------
    environ_var : str
        name of an environment variable
    params_types : dict
        {param name: type}, values will be cast to type

    Returns
    -------
    dict

    Notes
    -----
    settings must of form 'param_name1=param_val,param_name2=param_val2'
    """
    var = os.environ.get(environ_var, None)
    if var is None:
        return {}

    result = {}
    for item in var.split(","):
        item = item.split("=")
        if len(item) != 2 or item[0] not in params_types:
            continue

        name, val = item
        try:
            result[name] = params_types[name](val)
        except (TypeError, ValueError):
            warnings.warn(
                f"could not cast {name}={val} to type {params_types[name]}, skipping",
                stacklevel=2,
            )

    return result


def doc_summary(obj) -> str:
    """first sentence of the docstring of obj, or an empty string"""
    doc = getattr(obj, "__doc__", None) or ""
    lines = []
    for line in doc.strip().splitlines():
        line = line.strip()
        if not line:
            break
        lines.append(line)

    summary = " ".join(lines)
    return summary.split(". ")[0].rstrip(".")
