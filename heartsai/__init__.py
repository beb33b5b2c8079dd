# -*- coding: utf-8 -*-

"""Decision core for computer-controlled Hearts players (passing and card play), with a
simple deal/game harness for driving the players
"""
