"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the console. It deals with the thickness formula,
the material records and the flat files they are stored in.
"""
from thinfilmcalc.model.io import IOManager
from thinfilmcalc.model.library import MaterialLibrary
from thinfilmcalc.model.materials import Material
from thinfilmcalc.model.thickness import compute_thickness, thickness_is_defined

__all__ = ["IOManager", "Material", "MaterialLibrary", "compute_thickness", "thickness_is_defined"]
