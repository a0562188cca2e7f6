# ==============================================================================
# DOMAIN MODELS PACKAGE INITIALIZATION
# ==============================================================================

"""
Domain Models
=============

SQLAlchemy ORM models for the access administration tables:
- Person, User: people and their login accounts
- Rol, Permission: roles and grantable actions
- Form, Module: UI screens and their grouping
- RolUser, ModuleForm, RolFormPermission: junction tables
"""

from access_admin.domain_models.base import SQLBase, SoftDeleteMixin
from access_admin.domain_models.person import Person
from access_admin.domain_models.user import User
from access_admin.domain_models.rol import Rol
from access_admin.domain_models.permission import Permission
from access_admin.domain_models.form import Form
from access_admin.domain_models.module import Module
from access_admin.domain_models.assignments import (
    ModuleForm,
    RolFormPermission,
    RolUser,
)

__all__ = [
    "SQLBase",
    "SoftDeleteMixin",
    "Person",
    "User",
    "Rol",
    "Permission",
    "Form",
    "Module",
    "RolUser",
    "ModuleForm",
    "RolFormPermission",
]
