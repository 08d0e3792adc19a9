# Services package.
#
#   comment_service  — CRUD contract for Comment, translating store
#                      failures into the errors in ``comment_api.errors``
#
# Services receive their store through the constructor so the router layer
# (via ``comment_api.dependencies``) controls the session and transaction
# boundary.
