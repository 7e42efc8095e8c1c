"""
Chaines localisees du depot Media Time (anglais).

Correspondance plate cle -> texte, consommee pour les libelles du formulaire
de configuration et le message de validation.
"""

COMPONENT = "repository_mediatime"

STRINGS: dict[str, str] = {
    "configplugin": "Configuration for Media Time repository",
    "enablecourseinstances": (
        "Allow admins to add a Media Time repository instance to a course "
        "(configurable only by admins)"
    ),
    "enableuserinstances": (
        "Allow admins to add a Media Time repository instance for personal use "
        "(configurable only by admins)"
    ),
    "externalfile": "External file",
    "filereference": "File reference",
    "internalfile": "Internal file",
    "mediatime:view": "View Media Time repository plugin",
    "nopermissions": "Sorry, but you do not currently have permissions to do that ({what}).",
    "pluginname": "Available Media Time resources",
    "pluginname_help": "Resources available to current user",
    "privacy:metadata": (
        "The Available Media Time resources repository plugin does not store "
        "or transmit any personal data."
    ),
    "returntypes": "Return types",
    "selectreturntype": "You must select at least one return type",
}


def get_string(key: str, **params: str) -> str:
    """
    Retourne la chaine localisee, avec substitution des parametres {nom}.

    Une cle inconnue est retournee entre crochets, comme le fait l'hote.
    """
    text = STRINGS.get(key)
    if text is None:
        return f"[[{key}]]"
    return text.format(**params) if params else text
