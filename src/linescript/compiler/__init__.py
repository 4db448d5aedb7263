"""
Compiler Subpackage.

Frontend (text -> IR), IR definitions, analysis and backends (IR -> text).
"""
