import pygame

class GameOverOverlay:
    """Dimmed panel over the board while the game is over."""
    def __init__(self, font):
        self.font=font
        self.lines=[
            ("GAME OVER",(255,220,220)),
            ("R to restart",(200,210,235)),
        ]

    def draw(self,screen,rect,active):
        if not active: return
        s=pygame.Surface((rect.width,rect.height),pygame.SRCALPHA); s.fill((20,25,40,200))
        screen.blit(s,rect.topleft)
        y=rect.centery-20
        for txt,col in self.lines:
            surf=self.font.render(txt,True,col)
            screen.blit(surf,surf.get_rect(center=(rect.centerx,y))); y+=30
