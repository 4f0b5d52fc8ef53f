import pygame

from candybox.core.models import ContentType


def candy_ids(controller):
    return [i for i, c in enumerate(controller.cells) if c.content is ContentType.CANDY]


def bomb_ids(controller):
    return [i for i, c in enumerate(controller.cells) if c.content is ContentType.BOMB]


def clear_level(controller):
    for i in candy_ids(controller):
        controller.reveal(i)


class FakeSound:
    def __init__(self, path):
        self.path = path
        self.plays = 0

    def play(self):
        self.plays += 1


class FakeMixer:
    def __init__(self, init_error=False):
        self.init_error = init_error
        self.initialised = False
        self.calls = []
        self.sounds = {}

    def get_init(self):
        return self.initialised

    def init(self):
        if self.init_error:
            raise pygame.error("no audio device")
        self.initialised = True

    def Sound(self, path):
        if path.endswith(".bad"):
            raise pygame.error("unsupported format")
        sound = FakeSound(path)
        self.sounds[path] = sound
        return sound

    def pause(self):
        self.calls.append("pause")

    def unpause(self):
        self.calls.append("unpause")

    def stop(self):
        self.calls.append("stop")
