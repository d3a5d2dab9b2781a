"""
Core services: configuration loading, input, display, scene management.

Import submodules directly (e.g. gameshell.core.services.scene_manager);
scene_manager imports every scene, so it is not re-exported here.
"""
