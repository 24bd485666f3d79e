"""P33L PFP editor - profile picture compositing with hats and frames"""
