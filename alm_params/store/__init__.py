"""ALM Params persistence: document load/save and the editing session."""

from alm_params.store.store import ConfigurationStore, load, save
