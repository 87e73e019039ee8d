"""Speed overlay (F1), main menu, and pause / game-over banners"""
import pygame
from blockfall_config import CONFIG, SPEED_MIN, SPEED_MAX

DIFFICULTY_LABELS = [("easy", "Easy  (ghost on, speed 1)"), ("medium", "Medium  (no ghost, speed 7)")]


class Overlay:
    """Operator controls; every change is pushed straight into the running game."""
    def __init__(self, game):
        self.game = game
        self.active = False
        self.items = [
            ("SPEED_LEVEL", "Speed level", SPEED_MIN, SPEED_MAX, 1),
            ("FALL_INTERVAL_MS", "Drop interval (ms)", 50, 2000, 50),
            ("SHOW_GHOST", "Ghost piece", False, True, None),
        ]
        self.index = 0

    def toggle(self): self.active = not self.active

    def _apply(self, key):
        g = self.game
        if key == "SPEED_LEVEL":
            CONFIG[key] = g.set_speed_level(CONFIG[key])
            CONFIG["FALL_INTERVAL_MS"] = None
        elif key == "FALL_INTERVAL_MS":
            CONFIG[key] = g.set_fall_interval_ms(CONFIG[key])
        elif key == "SHOW_GHOST":
            if g.show_ghost != CONFIG[key]:
                g.toggle_ghost()

    def handle(self, e):
        if e.key in (pygame.K_ESCAPE, pygame.K_F1): self.toggle(); return
        if e.key == pygame.K_UP: self.index = (self.index-1) % len(self.items); return
        if e.key == pygame.K_DOWN: self.index = (self.index+1) % len(self.items); return
        key, label, lo, hi, step = self.items[self.index]
        if isinstance(lo, bool):
            if e.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_LEFT, pygame.K_RIGHT):
                CONFIG[key] = not CONFIG[key]
                self._apply(key)
            return
        val = CONFIG[key]
        if val is None:
            val = self.game.interval
        if e.key == pygame.K_LEFT: CONFIG[key] = max(lo, val-step)
        elif e.key == pygame.K_RIGHT: CONFIG[key] = min(hi, val+step)
        else: return
        self._apply(key)

    def draw(self, screen, font, w, h):
        if not self.active: return
        s = pygame.Surface((w-80, h-80), pygame.SRCALPHA); s.fill((10,25,35,230))
        screen.blit(s, (40, 40))
        screen.blit(font.render("SPEED (F1/Esc to close)", True, (230,240,255)), (60, 56))
        screen.blit(font.render("↑/↓ select • ←/→ adjust • Enter toggle", True, (200,210,235)), (60, 80))
        y = 120
        for i, (key, label, lo, hi, step) in enumerate(self.items):
            col = (255,255,255) if i == self.index else (200,210,235)
            v = CONFIG[key]
            if key == "FALL_INTERVAL_MS":
                v = self.game.interval
            elif isinstance(v, bool):
                v = "on" if v else "off"
            screen.blit(font.render(f"{label}: {v}", True, col), (60, y)); y += 30


class Menu:
    """Difficulty picker shown before a game starts."""
    def __init__(self):
        self.index = 0

    def handle(self, e):
        """Return the chosen difficulty name once Enter is pressed."""
        if e.key == pygame.K_UP: self.index = (self.index-1) % len(DIFFICULTY_LABELS)
        elif e.key == pygame.K_DOWN: self.index = (self.index+1) % len(DIFFICULTY_LABELS)
        elif e.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE):
            return DIFFICULTY_LABELS[self.index][0]
        elif e.key == pygame.K_1: return "easy"
        elif e.key == pygame.K_2: return "medium"
        return None

    def draw(self, screen, font, big_font, w, h, high_score):
        s = pygame.Surface((w, h), pygame.SRCALPHA); s.fill((6,20,35,235))
        screen.blit(s, (0, 0))
        title = big_font.render("BLOCKFALL", True, (143,209,79))
        screen.blit(title, title.get_rect(center=(w//2, h//3)))
        y = h//3 + 60
        for i, (name, label) in enumerate(DIFFICULTY_LABELS):
            col = (255,255,255) if i == self.index else (160,180,200)
            t = font.render(f"{i+1}. {label}", True, col)
            screen.blit(t, t.get_rect(center=(w//2, y))); y += 32
        hs = font.render(f"High score: {high_score}", True, (200,225,230))
        screen.blit(hs, hs.get_rect(center=(w//2, y + 24)))


def draw_banner(screen, big_font, font, w, h, title, sub):
    s = pygame.Surface((w, h), pygame.SRCALPHA); s.fill((0,0,0,150))
    screen.blit(s, (0, 0))
    t = big_font.render(title, True, (255,230,220))
    screen.blit(t, t.get_rect(center=(w//2, h//2 - 20)))
    st = font.render(sub, True, (220,230,240))
    screen.blit(st, st.get_rect(center=(w//2, h//2 + 20)))
