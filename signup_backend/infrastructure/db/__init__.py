# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .session import Base, create_db_engine, init_db, make_session_factory, session_scope

__all__ = ["Base", "create_db_engine", "init_db", "make_session_factory", "session_scope"]
