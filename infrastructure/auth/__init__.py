from infrastructure.auth.supabase_auth import SupabaseAuthProvider, SupabaseAuthSubscription
from infrastructure.auth.session_storage import FileSessionStorage

__all__ = [
    "SupabaseAuthProvider",
    "SupabaseAuthSubscription",
    "FileSessionStorage",
]
