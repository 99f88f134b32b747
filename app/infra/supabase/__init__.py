"""Supabase infrastructure module"""
from .client import get_supabase_client
from .realtime import RealtimeBroadcaster

__all__ = ['get_supabase_client', 'RealtimeBroadcaster']
