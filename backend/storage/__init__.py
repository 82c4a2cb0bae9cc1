"""File-based JSON storage for the catalogue and day plans.

Data layout:
  data/
    activities.json      User-added activities (merged over presets)
    plans/
      <city_id>.json     The day plan for a city (cityId, pax, activities, totalPrice)
    config.json          App settings (default_pax, currency)
  presets/
    cities.json          Built-in cities
    activities.json      Built-in read-only activities

Catalogue merging: list_activities() and get_activity() merge presets + user
data; user data wins on id collision. Preset activities cannot be deleted.
A user activity cannot be deleted while any stored plan references it.

Plans are stored as the engine returned them. The stored totalPrice is never
trusted on read: callers reprice against the current catalogue.

Config: get_config() returns defaults merged with stored values.
update_config() applies partial updates of known keys.

There is no locking; concurrent writers to the same plan race.
"""

# Re-export all public symbols so `from backend import storage` keeps working.

from .core import (  # noqa: F401
    data_dir,
    init_storage,
    plans_dir,
    presets_dir,
    slugify,
)

from .catalogue import (  # noqa: F401
    create_activity,
    delete_activity,
    get_activity,
    get_catalogue,
    get_city,
    list_activities,
    list_cities,
)

from .plans import (  # noqa: F401
    delete_plan,
    get_plan,
    list_plans,
    save_plan,
)

from .config import (  # noqa: F401
    get_config,
    update_config,
)
