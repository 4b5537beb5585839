"""The two playable characters and the movement rules they share."""

from __future__ import annotations

from collections.abc import Container

from thomaslate.geometry import Rect, Vector2

RUN_SPEED = 400.0


class PlayableCharacter:
    """A character that runs left and right, jumps for a fixed time and falls.

    ``location`` is where the character logically is. ``sprite_location`` is
    where its sprite was last placed; collision rectangles are measured from
    the sprite, which follows ``location`` at the end of every update.
    """

    jump_key = "up"
    left_key = "left"
    right_key = "right"
    speed = RUN_SPEED

    def __init__(self, size: Vector2, jump_duration: float) -> None:
        self.size = size
        self.jump_duration = jump_duration
        self.gravity = 0.0
        self.location = Vector2()
        self.sprite_location = Vector2()
        self.is_jumping = False
        self.is_falling = True
        self.left_pressed = False
        self.right_pressed = False
        self.time_this_jump = 0.0
        self.just_jumped = False
        self.feet = Rect()
        self.head = Rect()
        self.left = Rect()
        self.right = Rect()

    @property
    def position(self) -> Rect:
        """The rectangle the sprite covers."""
        return Rect(
            self.sprite_location.x,
            self.sprite_location.y,
            self.size.x,
            self.size.y,
        )

    @property
    def center(self) -> Vector2:
        return Vector2(
            self.location.x + self.size.x / 2,
            self.location.y + self.size.y / 2,
        )

    def spawn(self, start_position: Vector2, gravity: float) -> None:
        """Place the character at ``start_position`` under ``gravity``."""
        self.location = start_position
        self.gravity = gravity
        self.sprite_location = self.location

    def handle_input(self, pressed: Container[str]) -> bool:
        """Read the held keys; return True if a jump started just now.

        A jump only starts while neither jumping nor falling. Releasing the
        jump key ends any jump and starts a fall.
        """
        self.just_jumped = False
        if self.jump_key in pressed:
            if not self.is_jumping and not self.is_falling:
                self.is_jumping = True
                self.time_this_jump = 0.0
                self.just_jumped = True
        else:
            self.is_jumping = False
            self.is_falling = True
        self.left_pressed = self.left_key in pressed
        self.right_pressed = self.right_key in pressed
        return self.just_jumped

    def update(self, elapsed: float) -> None:
        """Advance movement by ``elapsed`` seconds and refresh the body parts."""
        x, y = self.location.x, self.location.y
        if self.right_pressed:
            x += self.speed * elapsed
        if self.left_pressed:
            x -= self.speed * elapsed
        if self.is_jumping:
            self.time_this_jump += elapsed
            if self.time_this_jump < self.jump_duration:
                y -= self.gravity * 2 * elapsed
            else:
                self.is_jumping = False
                self.is_falling = True
        if self.is_falling:
            y += self.gravity * elapsed
        self.location = Vector2(x, y)

        r = self.position
        self.feet = Rect(r.left + 3, r.top + r.height + 1, r.width - 6, 1)
        self.head = Rect(r.left, r.top + r.height * 0.3, r.width, 30)
        self.right = Rect(r.left + r.width - 2, r.top + r.height * 0.35, 1, r.height * 0.3)
        self.left = Rect(r.left + 1, r.top + r.height * 0.35, 1, r.height * 0.3)
        self.sprite_location = self.location

    def stop_falling(self, position: float) -> None:
        """Stand on a surface whose top is at ``position``, unless jumping."""
        if not self.is_jumping:
            self.location = Vector2(self.location.x, position - self.size.y)
            self.sprite_location = self.location
            self.is_falling = False

    def stop_right(self, position: float) -> None:
        self.location = Vector2(position - self.size.x, self.location.y)
        self.sprite_location = self.location

    def stop_left(self, position: float) -> None:
        self.location = Vector2(position + self.size.x, self.location.y)
        self.sprite_location = self.location

    def stop_jump(self) -> None:
        """Cut a jump short and start falling."""
        self.is_jumping = False
        self.is_falling = True


class Thomas(PlayableCharacter):
    """The taller character, steered with W, A and D."""

    jump_key = "w"
    left_key = "a"
    right_key = "d"

    def __init__(self, size: Vector2) -> None:
        super().__init__(size, jump_duration=0.45)


class Bob(PlayableCharacter):
    """The smaller character, steered with the arrow keys."""

    jump_key = "up"
    left_key = "left"
    right_key = "right"

    def __init__(self, size: Vector2) -> None:
        super().__init__(size, jump_duration=0.25)