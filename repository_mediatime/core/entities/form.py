"""
Formulaire de configuration d'instance.

Representation minimale du formulaire de l'hote : une liste ordonnee
d'elements avec leur type de parametre et leur valeur par defaut.
Le rendu HTML reste a la charge de l'hote.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class FormElement:
    """
    Element de formulaire.

    Attributs :
        kind : Type d'element ("checkbox", "static", ...)
        name : Nom du champ (None pour un element statique)
        label : Libelle affiche a gauche
        text : Texte affiche a cote de l'element
        param_type : Type de nettoyage de la valeur ("int", "text"...)
        default : Valeur par defaut
    """

    kind: str
    name: Optional[str]
    label: str = ""
    text: str = ""
    param_type: Optional[str] = None
    default: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "name": self.name,
            "label": self.label,
            "text": self.text,
            "paramtype": self.param_type,
            "default": self.default,
        }


@dataclass
class ConfigForm:
    """Formulaire d'edition / creation d'une instance de depot."""

    elements: list[FormElement] = field(default_factory=list)

    def add_element(
        self, kind: str, name: Optional[str], label: str = "", text: str = ""
    ) -> FormElement:
        element = FormElement(kind=kind, name=name, label=label, text=text)
        self.elements.append(element)
        return element

    def get_element(self, name: str) -> FormElement:
        """Retourne l'element nomme. Leve KeyError s'il n'existe pas."""
        for element in self.elements:
            if element.name == name:
                return element
        raise KeyError(name)

    def set_type(self, name: str, param_type: str) -> None:
        self.get_element(name).param_type = param_type

    def set_default(self, name: str, value: Any) -> None:
        self.get_element(name).default = value

    def to_dict(self) -> dict[str, Any]:
        return {"elements": [element.to_dict() for element in self.elements]}
