from planet_defense.models.missile import (
    Missile,
    MissileManager,
    Silhouette,
    nearest_impact_index,
)
from planet_defense.models.explosion import Explosion, ExplosionManager
from planet_defense.models.spawner import Spawner
from planet_defense.models.targeting import (
    HitTest,
    RadialHitTest,
    ShapeHitTest,
    make_hit_test,
)

__all__ = [
    "Missile", "MissileManager", "Silhouette", "nearest_impact_index",
    "Explosion", "ExplosionManager",
    "Spawner",
    "HitTest", "RadialHitTest", "ShapeHitTest", "make_hit_test",
]
