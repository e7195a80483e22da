from .roles import FALLBACK_COLOR_MAP, ROLES, assign_roles, override_role

__all__ = ["FALLBACK_COLOR_MAP", "ROLES", "assign_roles", "override_role"]
