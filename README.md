# gamekit

Small building blocks for games written in Python. They do not depend on any
engine. Nothing in the package opens a window or draws to a screen. Your own
callbacks and objects do the loading, drawing and input. Because of this the
pieces work with any rendering backend and can be tested without one.

## What is inside

- `gamekit.colors`
  - `WHITE`, `BLACK`, `RED`, `GREEN` and `BLUE` constants.
  - `get_r`, `get_g` and `get_b`, which take the 8-bit channels out of packed `0xAARRGGBB` colours.
- `gamekit.vector2`
  - `Vector2`, a frozen 2D vector with the `+`, `-`, `*` and `/` operators. Multiplying one `Vector2` by another multiplies component by component.
  - Methods: `length_sq`, `length`, `dot`, `cross`, `normalized`, `rotated_by` and `to_int`.
  - `normalized` returns the zero vector when the length is too short.
- `gamekit.transform2d`
  - `Transform2D` holds position, scale, rotation in radians and a pivot from 0 to 1.
  - `reset` returns it to the defaults.
  - `contains(world_point, size)` tests whether a point lies inside a rectangle that is rotated, scaled and offset by the pivot. It always returns False when a scale axis is not positive.
- `gamekit.math3d`
  - `Vector3`.
  - `Matrix`, a 4x4 matrix used with row vectors. It has `identity`, `scaling`, `translation` and `multiply`. The operator form is `a @ b`.
  - `Quaternion`, with `identity`, `from_euler_angles`, `from_matrix`, `to_matrix`, `normalized`, multiplication and `slerp` along the shorter arc.
- `gamekit.collision`
  - `CollisionShapeType`, `ComponentID` and `CollisionInfo` (normal and depth).
  - `CollisionPair`, which always stores the smaller shape type first. It can therefore be used as an order-independent, sortable dictionary key.
- `gamekit.rng`
  - `Random` guards its engine with a lock and takes an optional seed.
  - `get_int(low, high)` includes both ends of the range.
  - `get_float(low, high)` returns values in `[low, high)`.
  - Both raise `ValueError` when `low > high`.
  - `Random.instance()` is a shared instance seeded from system entropy.
- `gamekit.transform`
  - `TransformComponent` holds position, velocity, rotation and scale.
  - The rotation is normalised whenever it is assigned.
  - `update(dt)` moves the position by the velocity.
  - It also provides `world_matrix` (scale, then rotation, then translation), `rotation_matrix`, `set_rotation_euler`, `add_yaw`, `add_pitch`, `forward`, `right` and `up`.
- `gamekit.prototypes`
  - `EntityPrototype` is an abstract base with `clone` and `clone_with_transform`.
  - `PrototypeManager` has `register`, `create`, `create_at`, `has`, `all_ids`, `clear` and a shared `instance()`.
  - An unknown id raises `UnknownPrototypeError`, which is a `LookupError`.
- `gamekit.resources`
  - `ResourceKind` and `ResourceTraits` (load and unload callbacks).
  - `ResourceCache` and `ResourceManager` cache, by path, the handles that your loaders return. A handle of `-1` means the load failed and is not cached.
  - `SoundFactory` caches sound handles by path.
  - `AnimationFactory` caches animation indices by model handle and name.
- `gamekit.virtual_screen`
  - `VirtualScreen` maps between a fixed virtual resolution and a window. The modes are `ScalingMode.STRETCH_TO_FILL` and `ScalingMode.KEEP_ASPECT`; `KEEP_ASPECT` is the default and centres the image.
  - Methods: `update_scaling`, `draw_size`, `to_virtual` and `to_screen`.
- `gamekit.ui_element`
  - `UIElement` holds a transform, a visibility flag, a name and a z-order.
  - It hands drawing, input and animation to pluggable `UIRenderer`, `UIInteractor` and `UIAnimator` objects.
  - `draw()` returns a list of whatever the renderer returned.
- `gamekit.ui_widgets`
  - `UIPanel` has children, draws them in z-order and passes visibility down to them.
  - `UIButton` has a `ButtonState` and `set_on_click` / `invoke_on_click`.
  - `UIText` has text, colour and font size.
  - `UIImage` shows an image.
  - Their built-in renderers return lightweight draw commands (paths, transforms, text), not pixels.
- `gamekit.ui_system`
  - `UISystem` is a layer of root elements. `render_list()` gathers the visible elements that have renderers, expands panels and sorts the result by z-order.
  - `UIManager` holds named layers and draws them in order of `layer_depth`.
- `gamekit.sphere_collider`
  - `SphereCollider` is centred on a `TransformComponent`.
  - Its world radius is scaled by the largest scale axis of the transform.
- `gamekit.third_person_camera`
  - `ThirdPersonCamera` orbits a target transform at a set yaw, pitch and distance.
  - It eases toward its ideal pose in a way that does not depend on frame rate.
  - The pitch is clamped to `[MIN_PITCH, MAX_PITCH]`.
  - `look_rotation_matrix` builds a rotation from a forward and an up vector.

## What it does not do

- It has no rendering or audio backend, no window and no game loop.
- It has no input handling. `UIButton` does not come with an interactor that detects hover or clicks. You attach your own `UIInteractor` and set `state` and call `invoke_on_click` from it. The button's `bounding_size()` is zero until you set the renderer's normal sprite size.
- It has no entity or scene system. The prototype manager returns whatever your `EntityPrototype.clone` produces.
- The camera does no obstacle checks, and it does not rotate from mouse input.

## Installation

```
pip install .
```

Install with the test extra to run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from gamekit.math3d import Quaternion, Vector3
from gamekit.transform import TransformComponent

player = TransformComponent()
player.velocity = Vector3(0.0, 0.0, 3.0)
player.add_yaw(0.5)
player.update(1 / 60)
facing = player.forward()

halfway = Quaternion.slerp(Quaternion.identity(), player.rotation, 0.5)
world = player.world_matrix()
```

```python
from gamekit.virtual_screen import ScalingMode, VirtualScreen

screen = VirtualScreen(1280, 720, ScalingMode.KEEP_ASPECT)
screen.update_scaling(1920, 1200)
vx, vy = screen.to_virtual(960, 600)
```

```python
from gamekit.resources import SoundFactory

handles = iter(range(1, 100))

def load(path):
    return next(handles)

def unload(handle):
    print("released", handle)

sounds = SoundFactory(load=load, unload=unload)
handle = sounds.load("sounds/decide.wav")   # cached on later calls
sounds.clear()                              # unloads everything
```