# backend/app/auth/__init__.py
# Token issuing routes and the bearer dependency used by every resource router.
