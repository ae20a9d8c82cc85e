"""HR Portal package.

Feature modules (employees, attendance, interface, imports, reports,
authorizations, users) each carry their own model, repository, service and a
thin Flask controller exposing JSON routes.
"""
