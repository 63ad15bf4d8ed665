"""Framework adapters for entitycache."""
