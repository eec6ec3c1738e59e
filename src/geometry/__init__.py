from geometry.hittable import HitRecord, Hittable, RAY_EPSILON
from geometry.plane import Plane, PARALLEL_EPSILON
from geometry.sphere import Sphere
from geometry.world import Scene, SHADOW_BIAS
