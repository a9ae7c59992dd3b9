import cairo

from planetaryorbits.engine.vec import Vector2D

SCREEN_SIZE = Vector2D(800, 800)


class Camera:
    """World position (the point shown at the screen centre) plus a uniform zoom.

    The camera never clamps its own zoom; input handling does that.
    """

    def __init__(self, position:Vector2D|None=None, zoom:float=1.0, screen_size:Vector2D=SCREEN_SIZE):
        self.position = Vector2D() if position is None else position
        self.zoom = zoom
        self.screen_size = screen_size

    def __repr__(self):
        return f"Camera(position={self.position}, zoom={self.zoom})"

    def get_matrix(self) -> cairo.Matrix:
        matrix = cairo.Matrix()
        matrix.translate(self.screen_size.x / 2, self.screen_size.y / 2)
        matrix.scale(self.zoom, self.zoom)
        matrix.translate(-self.position.x, -self.position.y)
        return matrix

    def get_inverse_matrix(self) -> cairo.Matrix:
        matrix = self.get_matrix()
        matrix.invert()
        return matrix

    def world_to_screen(self, world_pos:Vector2D) -> Vector2D:
        """(world - position) * zoom + screen centre"""
        return Vector2D(*self.get_matrix().transform_point(world_pos.x, world_pos.y))

    def screen_to_world(self, screen_pos:Vector2D) -> Vector2D:
        """(screen - screen centre) / zoom + position"""
        return Vector2D(*self.get_inverse_matrix().transform_point(screen_pos.x, screen_pos.y))

    def pan(self, dx:float, dy:float):
        self.position = self.position + Vector2D(dx, dy)
