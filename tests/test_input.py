"""Tests for the pygame key map."""
import unittest

import pygame

from blockfall_game import Command
from blockfall_input import command_for


class TestKeymap(unittest.TestCase):

    def test_arrows(self):
        self.assertIs(command_for(pygame.K_LEFT), Command.MOVE_LEFT)
        self.assertIs(command_for(pygame.K_RIGHT), Command.MOVE_RIGHT)
        self.assertIs(command_for(pygame.K_DOWN), Command.SOFT_DROP)
        self.assertIs(command_for(pygame.K_UP), Command.ROTATE)

    def test_rotate_and_hard_drop(self):
        self.assertIs(command_for(pygame.K_q), Command.ROTATE)
        self.assertIs(command_for(pygame.K_SPACE), Command.HARD_DROP)

    def test_pause_toggles(self):
        self.assertIs(command_for(pygame.K_p, paused=False), Command.PAUSE)
        self.assertIs(command_for(pygame.K_p, paused=True), Command.RESUME)

    def test_unmapped(self):
        self.assertIsNone(command_for(pygame.K_F12))


if __name__ == "__main__":
    unittest.main()
