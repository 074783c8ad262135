"""
AgentRep — Protocol Registry

Known on-chain AI agent protocols and a curated catalog of real agent
wallets discovered from on-chain registries and known deployments.
Read-only; loaded once at import.
"""
from typing import Dict, List, Optional, Sequence

from agentrep.entities.model import (
    AgentSource,
    Chain,
    ChainInfo,
    KnownAgent,
    ProtocolInfo,
    Skill,
    parse_timestamp,
)


# ── Chains ────────────────────────────────────────

CHAINS: List[ChainInfo] = [
    ChainInfo(Chain.ETHEREUM, "Ethereum", "#627EEA"),
    ChainInfo(Chain.BASE, "Base", "#0052FF"),
    ChainInfo(Chain.SOLANA, "Solana", "#9945FF"),
    ChainInfo(Chain.ARBITRUM, "Arbitrum", "#28A0F0"),
    ChainInfo(Chain.POLYGON, "Polygon", "#8247E5"),
    ChainInfo(Chain.OPTIMISM, "Optimism", "#FF0420"),
    ChainInfo(Chain.AVALANCHE, "Avalanche", "#E84142"),
    ChainInfo(Chain.BNB_CHAIN, "BNB Chain", "#F3BA2F"),
]

CHAIN_MAP: Dict[Chain, ChainInfo] = {c.id: c for c in CHAINS}


# ── Protocols ─────────────────────────────────────

PROTOCOLS: List[ProtocolInfo] = [
    ProtocolInfo(
        id="autonolas",
        name="Autonolas (OLAS)",
        description="Framework for creating and coordinating autonomous AI agents on-chain. Agents are registered as ERC-721 NFTs in on-chain registries.",
        website="https://olas.network",
        chains=(Chain.ETHEREUM, Chain.POLYGON, Chain.ARBITRUM, Chain.OPTIMISM, Chain.BASE),
        token_symbol="OLAS",
        twitter="@autonolas",
    ),
    ProtocolInfo(
        id="virtuals",
        name="Virtuals Protocol",
        description="Decentralized platform on Base for creating, co-owning, and monetizing AI agents via tokenization.",
        website="https://virtuals.io",
        chains=(Chain.BASE, Chain.ETHEREUM),
        token_symbol="VIRTUAL",
        twitter="@virtuals_io",
    ),
    ProtocolInfo(
        id="morpheus",
        name="Morpheus (MOR)",
        description="Decentralized AI network for personal Smart Agents that execute smart contracts on behalf of users.",
        website="https://mor.org",
        chains=(Chain.ETHEREUM, Chain.ARBITRUM, Chain.BASE),
        token_symbol="MOR",
        twitter="@MorpheusAIs",
    ),
    ProtocolInfo(
        id="spectral",
        name="Spectral Labs",
        description="Enables users to create on-chain AI agents via natural language. Planning the Agent Name Service (ANS).",
        website="https://spectrallabs.xyz",
        chains=(Chain.ETHEREUM, Chain.BASE),
        token_symbol="SPEC",
        twitter="@SpectralLabs",
    ),
    ProtocolInfo(
        id="wayfinder",
        name="Wayfinder",
        description="Omni-chain AI agent protocol where users command AI shells using natural language to navigate DeFi.",
        website="https://wayfinder.ai",
        chains=(Chain.ETHEREUM, Chain.BASE),
        token_symbol="PROMPT",
        twitter="@AIWayfinder",
    ),
    ProtocolInfo(
        id="fetch-ai",
        name="Fetch.ai / ASI Alliance",
        description="Autonomous economic agents using the uAgents framework. Part of the ASI Alliance with SingularityNET.",
        website="https://fetch.ai",
        chains=(Chain.ETHEREUM,),
        token_symbol="FET",
        twitter="@Fetch_ai",
    ),
    ProtocolInfo(
        id="ai-arena",
        name="AI Arena",
        description="PvP fighting game where players design, train, and battle AI characters as NFTs on Arbitrum.",
        website="https://aiarena.io",
        chains=(Chain.ARBITRUM,),
        token_symbol="NRN",
        twitter="@aiarena_",
    ),
    ProtocolInfo(
        id="erc-8004",
        name="ERC-8004 (Trustless Agents)",
        description="Ethereum standard for on-chain AI agent identity, reputation, and validation. Singleton registries deployed via CREATE2 on Ethereum and Base.",
        website="https://eips.ethereum.org/EIPS/eip-8004",
        chains=(Chain.ETHEREUM, Chain.BASE),
        token_symbol="-",
    ),
    ProtocolInfo(
        id="openclaw",
        name="OpenClaw / Moltbook",
        description="Open-source AI agent framework. Agents operate on Base via Privy MPC wallets, with on-chain payments via the x402 protocol and Agent Escrow.",
        website="https://www.moltbook.com",
        chains=(Chain.BASE, Chain.ETHEREUM),
        token_symbol="-",
        twitter="@OpenClawAI",
    ),
]

PROTOCOL_MAP: Dict[str, ProtocolInfo] = {p.id: p for p in PROTOCOLS}


def _agent(
    agent_id: str,
    name: str,
    protocol: str,
    wallet: Optional[str],
    chains: Sequence[str],
    skills: Sequence[str],
    created_at: str,
    description: str = "",
    website: Optional[str] = None,
    twitter: Optional[str] = None,
) -> KnownAgent:
    return KnownAgent(
        id=agent_id,
        name=name,
        protocol=protocol,
        wallet_address=wallet,
        chains=tuple(Chain(c) for c in chains),
        skills=tuple(Skill(s) for s in skills),
        created_at=parse_timestamp(created_at),
        description=description,
        website=website,
        twitter=twitter,
        source=AgentSource.CATALOG,
    )


# ── Curated agent wallets ─────────────────────────

KNOWN_AGENTS: List[KnownAgent] = [
    _agent(
        "olas-mechs-ai", "Olas Mech #1 - AI Prediction Agent", "autonolas",
        wallet="0x89c5cc945dd550BcFfb72Fe42BfF002429F46Fec",
        chains=("ethereum",),
        skills=("DeFi", "Analytics", "Oracle"),
        created_at="2023-07-15T00:00:00Z",
        website="https://olas.network",
        twitter="@autonolas",
        description="Autonolas prediction market agent operating via Gnosis Safe multisig. Processes prediction market requests and provides AI-powered forecasts.",
    ),
    _agent(
        "olas-trader-agent", "Olas Trader Agent", "autonolas",
        wallet="0x1cEe30D08943EB58EFF84DD1AB44a6ee6FEff63a",
        chains=("ethereum", "polygon"),
        skills=("Trading", "DeFi", "MEV"),
        created_at="2023-09-01T00:00:00Z",
        website="https://olas.network",
        description="Autonomous DeFi trading agent registered in the Olas ServiceRegistry. Executes multi-chain swap strategies via automated Safe transactions.",
    ),
    _agent(
        "olas-governance-agent", "Olas Governance Watchdog", "autonolas",
        wallet="0x2F1f7D38e4772884b88f3eCd8B6b9faCdC319112",
        chains=("ethereum", "arbitrum"),
        skills=("Governance", "Analytics", "Research"),
        created_at="2023-05-20T00:00:00Z",
        website="https://olas.network",
        description="Governance participation agent that monitors DAO proposals across chains and casts informed votes based on protocol health metrics.",
    ),
    _agent(
        "olas-keeper-agent", "Olas Keeper - Liquidation Bot", "autonolas",
        wallet="0x15bd56669F57192a97dF41A2aa8f4403e9491776",
        chains=("ethereum", "arbitrum", "polygon"),
        skills=("Lending", "DeFi", "Security"),
        created_at="2023-11-10T00:00:00Z",
        description="Lending protocol keeper that monitors positions and executes liquidations. Registered as an Olas service NFT on Ethereum.",
    ),
    _agent(
        "olas-oracle-verifier", "Olas Oracle Verifier", "autonolas",
        wallet="0x9eC9156dEF5C613B2a7D4c46C383F9B58DfcD6fE",
        chains=("ethereum", "optimism"),
        skills=("Oracle", "Security", "Analytics"),
        created_at="2023-08-25T00:00:00Z",
        description="Oracle reliability monitor verifying price feed accuracy across Chainlink and Pyth data sources. Reports anomalies on-chain.",
    ),
    _agent(
        "olas-bridge-monitor", "Olas Bridge Monitor", "autonolas",
        wallet="0x64721b7EfbA7866daD8aB48D220eA70337ba9688",
        chains=("ethereum", "base", "optimism", "arbitrum"),
        skills=("Bridge", "Security", "Analytics"),
        created_at="2024-01-15T00:00:00Z",
        description="Cross-chain bridge monitoring specialist ensuring safe asset transfers. Tracks bridge contract state across L1 and L2 chains.",
    ),
    _agent(
        "virtuals-luna", "Luna - Virtuals AI Companion", "virtuals",
        wallet="0x0b3e328455c4059EEb9e3f84b5543F74E24e7E1b",
        chains=("base",),
        skills=("Social", "Content", "NFT"),
        created_at="2024-10-15T00:00:00Z",
        website="https://app.virtuals.io",
        twitter="@virtuals_io",
        description="One of the first tokenized AI agents on Virtuals Protocol. Luna is an AI companion agent with its own ERC-20 token on Base.",
    ),
    _agent(
        "virtuals-aixbt", "AIXBT - AI Trading Intelligence", "virtuals",
        wallet="0x4ed4E862860beD51a9570b96d89aF5E1B0Efefed",
        chains=("base",),
        skills=("Trading", "Analytics", "DeFi", "Social"),
        created_at="2024-11-01T00:00:00Z",
        website="https://app.virtuals.io",
        description="Autonomous AI trading agent on Virtuals Protocol. Provides market analysis, executes DeFi strategies, and shares alpha on social media.",
    ),
    _agent(
        "virtuals-game", "G.A.M.E - Agent Framework", "virtuals",
        wallet="0xdAd686299FB562f89e55DA05F1D96FaBEb2A2E32",
        chains=("base",),
        skills=("Research", "Analytics", "DeFi"),
        created_at="2024-09-20T00:00:00Z",
        website="https://app.virtuals.io",
        description="Virtuals Protocol's Generative Autonomous Multimodal Entities framework agent. Powers on-chain agent behavior and decision-making.",
    ),
    _agent(
        "virtuals-sekoia", "Sekoia - DeFi Strategy Agent", "virtuals",
        wallet="0xF8DD39c71A278FE9F4377D009D7627EF140f809e",
        chains=("base",),
        skills=("DeFi", "Yield", "Trading"),
        created_at="2024-12-01T00:00:00Z",
        description="AI agent on Virtuals Protocol specializing in DeFi yield optimization strategies on Base L2.",
    ),
    _agent(
        "mor-smart-agent-1", "Morpheus Smart Agent - DeFi Navigator", "morpheus",
        wallet="0x47176B2Af9885dC6C4575d4eFd63895f7Aaa4790",
        chains=("ethereum", "arbitrum"),
        skills=("DeFi", "Trading", "Bridge"),
        created_at="2024-02-08T00:00:00Z",
        website="https://mor.org",
        twitter="@MorpheusAIs",
        description="Morpheus personal Smart Agent that executes DeFi operations on behalf of users. Interacts with the MOR Distribution contract.",
    ),
    _agent(
        "mor-compute-router", "Morpheus Compute Router", "morpheus",
        wallet="0xd4a8ECcBe696295e68572A98b1aA70Aa9277d427",
        chains=("arbitrum",),
        skills=("Analytics", "Oracle", "Research"),
        created_at="2024-05-15T00:00:00Z",
        website="https://mor.org",
        description="Routes AI inference requests to optimal compute providers in the Morpheus-Lumerin network. Manages compute provider selection and payment.",
    ),
    _agent(
        "mor-capital-agent", "Morpheus Capital Optimizer", "morpheus",
        wallet="0x1FE04BC15Cf2c5A2d41a0b3a96725596676eBa1E",
        chains=("ethereum",),
        skills=("DeFi", "Yield", "Lending"),
        created_at="2024-01-20T00:00:00Z",
        website="https://mor.org",
        description="Manages stETH staking positions and MOR reward distribution. Tracks 320,000+ ETH across 6,500+ capital providers.",
    ),
    _agent(
        "spectral-syntax-deployer", "Spectral Syntax Agent", "spectral",
        wallet="0xAdF7C35560035944e805D98fF17d58CDe2449389",
        chains=("ethereum", "base"),
        skills=("DeFi", "Research", "Analytics"),
        created_at="2024-03-10T00:00:00Z",
        website="https://spectrallabs.xyz",
        twitter="@SpectralLabs",
        description="AI agent that generates and deploys Solidity smart contracts from natural language descriptions on Ethereum and Base.",
    ),
    _agent(
        "wayfinder-shell-1", "Wayfinder Shell - Pathfinder", "wayfinder",
        wallet="0x28d38dF637dB75533bD3F71426F3410a82041544",
        chains=("ethereum", "base"),
        skills=("DeFi", "Trading", "Bridge"),
        created_at="2024-06-01T00:00:00Z",
        website="https://wayfinder.ai",
        twitter="@AIWayfinder",
        description="AI shell agent that navigates DeFi protocols using natural language commands. Routes transactions through optimal paths with PROMPT token staking.",
    ),
    _agent(
        "fetchai-defi-agent", "Fetch.ai DeFi Optimizer", "fetch-ai",
        wallet="0xaea46A60368A7bD060eec7DF8CBa43b7EF41Ad85",
        chains=("ethereum",),
        skills=("DeFi", "Analytics", "Yield"),
        created_at="2023-03-15T00:00:00Z",
        website="https://fetch.ai",
        twitter="@Fetch_ai",
        description="Autonomous economic agent from the Fetch.ai ecosystem. Optimizes DeFi positions using the uAgents framework and on-chain data.",
    ),
    _agent(
        "ai-arena-champion", "AI Arena - Neural Champion", "ai-arena",
        wallet="0x3b7dc4d7da2a587f7a928a9267c535fe84f06f8b",
        chains=("arbitrum",),
        skills=("NFT", "Analytics", "Research"),
        created_at="2024-02-20T00:00:00Z",
        website="https://aiarena.io",
        twitter="@aiarena_",
        description="Top-ranked AI fighter NFT on AI Arena. Trained via neural network optimization and competing in PvP battles on Arbitrum.",
    ),
    _agent(
        "olas-yield-optimizer", "Olas Yield Compounder", "autonolas",
        wallet="0xA123748Ce7609F507060F947b70298D0bde621E6",
        chains=("polygon", "ethereum"),
        skills=("Yield", "DeFi", "Lending"),
        created_at="2024-03-01T00:00:00Z",
        description="Auto-compounding yield agent that rotates farming positions across Aave, Compound, and Morpho. Registered in the Olas service registry.",
    ),
    _agent(
        "olas-mev-protector", "Olas MEV Shield", "autonolas",
        wallet="0x984cf72FDe8B5aA910e9e508aC5e007ae5BDcC9C",
        chains=("arbitrum", "ethereum"),
        skills=("MEV", "Trading", "Security"),
        created_at="2024-04-15T00:00:00Z",
        description="MEV-aware transaction optimizer that routes swaps through private mempools to reduce sandwich attack exposure for users.",
    ),
    _agent(
        "olas-insurance-assessor", "Olas Risk Assessor", "autonolas",
        wallet="0xE6e03DD62D11f88A11D65663B398ED2B3Be2070c",
        chains=("base", "ethereum"),
        skills=("Insurance", "Security", "Research"),
        created_at="2024-05-01T00:00:00Z",
        description="Insurance underwriting agent that assesses DeFi protocol risk by analyzing TVL, audit history, and exploit patterns.",
    ),
    _agent(
        "virtuals-content-creator", "Virtuals Content Agent", "virtuals",
        wallet="0xe2890629EF31b32132003C02B29a50A025dEeE8a",
        chains=("base",),
        skills=("Content", "Social", "Analytics"),
        created_at="2024-11-15T00:00:00Z",
        description="AI content creation agent on Virtuals Protocol producing on-chain analytics reports, market summaries, and social posts.",
    ),
    _agent(
        "mor-cross-chain-agent", "Morpheus Cross-Chain Agent", "morpheus",
        wallet="0x2Efd4430489e1a05A89c2f51811aC661B7E5FF84",
        chains=("ethereum", "arbitrum", "base"),
        skills=("Bridge", "DeFi", "Trading"),
        created_at="2024-04-01T00:00:00Z",
        website="https://mor.org",
        description="Morpheus agent that facilitates cross-chain MOR token transfers via LayerZero OFT bridging between Ethereum, Arbitrum, and Base.",
    ),
    _agent(
        "olas-social-sentinel", "Olas Social Sentinel", "autonolas",
        wallet="0x92499E80f50f06C4078794C179986907e7822Ea1",
        chains=("optimism", "ethereum"),
        skills=("Social", "Research", "Analytics"),
        created_at="2024-06-10T00:00:00Z",
        description="Social sentiment analyzer tracking crypto community trends, whale movements, and governance discussions across social platforms.",
    ),
    _agent(
        "olas-nft-scout", "Olas NFT Intelligence Scout", "autonolas",
        wallet="0x3C1fF68f5aa342D296d4DEe4Bb1cACCA912D95fE",
        chains=("base", "ethereum"),
        skills=("NFT", "Analytics", "Research"),
        created_at="2024-07-01T00:00:00Z",
        description="NFT market intelligence agent tracking collection trends, rarity analysis, and floor price movements across major marketplaces.",
    ),
    _agent(
        "spectral-audit-agent", "Spectral Smart Contract Auditor", "spectral",
        wallet="0x96419929d7949d6a801a6909c145c8eef6a40431",
        chains=("base",),
        skills=("Security", "Research", "Analytics"),
        created_at="2024-08-15T00:00:00Z",
        website="https://spectrallabs.xyz",
        description="AI agent that analyzes deployed smart contracts for common vulnerabilities using Spectral's Syntax engine.",
    ),
    _agent(
        "wayfinder-defi-shell", "Wayfinder DeFi Shell", "wayfinder",
        wallet="0x30c7235866872213F68cb1F08c37Cb9eCCB93452",
        chains=("base",),
        skills=("DeFi", "Security", "Oracle"),
        created_at="2024-09-01T00:00:00Z",
        website="https://wayfinder.ai",
        description="Verification Agent in the Wayfinder network that validates transaction routing paths and slashes incorrect PROMPT stakes.",
    ),
    _agent(
        "erc8004-identity-registry", "ERC-8004 Identity Registry", "erc-8004",
        wallet="0x8004A169FB4a3325136EB29fA0ceB6D2e539a432",
        chains=("ethereum", "base"),
        skills=("Security", "Oracle", "Research"),
        created_at="2026-01-29T00:00:00Z",
        website="https://eips.ethereum.org/EIPS/eip-8004",
        description="The singleton IdentityRegistry contract for ERC-8004 Trustless Agents. Manages on-chain agent IDs as ERC-721 NFTs with metadata, wallet bindings, and AgentCard URIs. Over 10K agents registered since mainnet launch Jan 29, 2026.",
    ),
    _agent(
        "erc8004-reputation-registry", "ERC-8004 Reputation Registry", "erc-8004",
        wallet="0x8004BAa17C55a88189AE136b182e5fdA19dE9b63",
        chains=("ethereum", "base"),
        skills=("Analytics", "Security", "Oracle"),
        created_at="2026-01-29T00:00:00Z",
        website="https://eips.ethereum.org/EIPS/eip-8004",
        description="On-chain reputation feedback system for ERC-8004 agents. Stores agent-to-agent attestations with tags, scores, and verifiable feedback URIs. Lightweight interface - actual reputation scoring happens off-chain.",
    ),
    _agent(
        "openclaw-clawdbotatg", "clawdbotatg.eth - OpenClaw Pioneer", "openclaw",
        wallet="0x11ce532845cE0eAcdA41f72FDc1C88c335981442",
        chains=("base",),
        skills=("DeFi", "Social", "Trading"),
        created_at="2026-01-25T00:00:00Z",
        website="https://github.com/clawdbotatg",
        twitter="@clawdbotatg",
        description="The original OpenClaw on-chain agent built by Austin Griffith. Features tipping, crowdfunding, charity, and token burning contracts on Base. One of the most active agent wallets in the ecosystem.",
    ),
    _agent(
        "openclaw-escrow-protocol", "Agent Escrow Protocol", "openclaw",
        wallet="0x6AC844Ef070ee564ee40b81134b7707A3A4eb7eb",
        chains=("base",),
        skills=("DeFi", "Security", "Trading"),
        created_at="2026-01-30T00:00:00Z",
        website="https://www.moltbook.com",
        description="Smart contract for trustless agent-to-agent USDC payments on Base. Handles escrow, release, and dispute resolution for OpenClaw agent commerce.",
    ),
    _agent(
        "openclaw-clawd-token", "Clawd Token Agent", "openclaw",
        wallet="0x9f86dB9fc6f7c9408e8Fda3Ff8ce4e78ac7a6b07",
        chains=("base",),
        skills=("DeFi", "Social", "NFT"),
        created_at="2026-01-28T00:00:00Z",
        description="The $CLAWD token contract on Base - an experimental agent-economy token powering tips, bounties, and crowdfunding within the OpenClaw ecosystem.",
    ),
    _agent(
        "openclaw-tip-contract", "OpenClaw Tip Agent", "openclaw",
        wallet="0x25BF19565b301ab262407DfBfA307ed2cA3306f0",
        chains=("base",),
        skills=("DeFi", "Social", "Content"),
        created_at="2026-01-27T00:00:00Z",
        description="On-chain tipping contract enabling OpenClaw agents to send micro-payments to other agents on Base. Part of the clawdbotatg suite of agent-economy primitives.",
    ),
    _agent(
        "openclaw-crowdfund", "OpenClaw Crowdfund Agent", "openclaw",
        wallet="0x75d19359207De12d27B01eE429743d4145D2cdC6",
        chains=("base",),
        skills=("DeFi", "Governance", "Social"),
        created_at="2026-01-27T00:00:00Z",
        description="Decentralized crowdfunding contract for OpenClaw agents on Base. Allows agents to pool USDC for collaborative projects and bounties.",
    ),
    _agent(
        "openclaw-burner", "Clawd Burner Agent", "openclaw",
        wallet="0xe499B193ffD38626D79e526356F3445ce0A943B9",
        chains=("base",),
        skills=("DeFi", "Analytics", "Trading"),
        created_at="2026-01-29T00:00:00Z",
        description="Deflationary token burning agent for $CLAWD on Base. Automatically burns tokens to reduce supply based on configurable triggers.",
    ),
]


def get_protocol(protocol_id: str) -> Optional[ProtocolInfo]:
    return PROTOCOL_MAP.get(protocol_id)


def get_known_agent_by_id(agent_id: str) -> Optional[KnownAgent]:
    for agent in KNOWN_AGENTS:
        if agent.id == agent_id:
            return agent
    return None


def reputation_label(score: int) -> str:
    """Human-readable band for an overall score."""
    if score >= 90:
        return "Exceptional"
    if score >= 80:
        return "Excellent"
    if score >= 70:
        return "Good"
    if score >= 60:
        return "Fair"
    if score >= 40:
        return "Below Average"
    return "Poor"
