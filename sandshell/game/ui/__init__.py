"""Layout table, layout resolution and control panel geometry."""
