"""Fixed contents of the files written into a freshly scaffolded project."""

from __future__ import annotations

import json

from .schema import RouterStyle
from .template import TemplateFileSet

__all__ = [
    "APP_ROUTER_FILES",
    "DEMO_ABI",
    "PAGES_ROUTER_FILES",
    "WEB3_CONFIG_FILES",
    "file_set_for",
]


WAGMI_TEMPLATE = """import { getDefaultConfig } from '@rainbow-me/rainbowkit';
import {
  arbitrum,
  base,
  mainnet,
  optimism,
  polygon,
  sepolia,
} from 'wagmi/chains';

export const config = getDefaultConfig({
  appName: '{{ name }}',
  projectId: 'YOUR_PROJECT_ID',
  chains: [
    mainnet,
    polygon,
    optimism,
    arbitrum,
    base,
    ...(process.env.NEXT_PUBLIC_ENABLE_TESTNETS === 'true' ? [sepolia] : []),
  ],
  ssr: true,
});
"""

FONTS_TEMPLATE = """import { Geist, Geist_Mono } from 'next/font/google';

export const geistSans = Geist({
  variable: '--font-geist-sans',
  subsets: ['latin'],
});

export const geistMono = Geist_Mono({
  variable: '--font-geist-mono',
  subsets: ['latin'],
});
"""

DEMO_ABI = [
    {
        "inputs": [{"internalType": "string", "name": "_greeting", "type": "string"}],
        "name": "setGreeting",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "greeting",
        "outputs": [{"internalType": "string", "name": "", "type": "string"}],
        "stateMutability": "view",
        "type": "function",
    },
]

PROVIDER_TEMPLATE = """'use client';

import * as React from 'react';
import { QueryClient, QueryClientProvider } from '@tanstack/react-query';
import { WagmiProvider } from 'wagmi';
import { RainbowKitProvider, darkTheme } from '@rainbow-me/rainbowkit';

import { config } from '@/wagmi';

const queryClient = new QueryClient();

export default function Web3Provider({ children }: { children: React.ReactNode }) {
  return (
    <WagmiProvider config={config}>
      <QueryClientProvider client={queryClient}>
        <RainbowKitProvider theme={darkTheme()}>{children}</RainbowKitProvider>
      </QueryClientProvider>
    </WagmiProvider>
  );
}
"""

APP_LAYOUT_TEMPLATE = """import type { Metadata } from 'next';
import '@rainbow-me/rainbowkit/styles.css';
import './globals.css';

import Web3Provider from './providers';
import { geistMono, geistSans } from '@/lib/fonts';

export const metadata: Metadata = {
  title: '{{ name|title }}',
  description: 'Web3 dApp built with RainbowKit, wagmi and Next.js',
};

export default function RootLayout({
  children,
}: Readonly<{ children: React.ReactNode }>) {
  return (
    <html lang="en">
      <body className={`${geistSans.variable} ${geistMono.variable} antialiased`}>
        <Web3Provider>{children}</Web3Provider>
      </body>
    </html>
  );
}
"""

PAGE_BODY = """    <main className="flex min-h-screen flex-col items-center justify-center gap-6 p-8">
      <h1 className="text-3xl font-bold">{{ name|title }}</h1>
      <ConnectButton />
      <p className="text-sm text-gray-500">
        Edit the demo contract ABI in src/ABI/demo.json to start building.
      </p>
    </main>
"""

APP_PAGE_TEMPLATE = (
    """'use client';

import { ConnectButton } from '@rainbow-me/rainbowkit';

export default function Home() {
  return (
"""
    + PAGE_BODY
    + """  );
}
"""
)

PAGES_APP_TEMPLATE = """import '@/styles/globals.css';
import '@rainbow-me/rainbowkit/styles.css';
import type { AppProps } from 'next/app';

import Web3Provider from '@/providers/Web3Provider';
import { geistMono, geistSans } from '@/lib/fonts';

export default function App({ Component, pageProps }: AppProps) {
  return (
    <Web3Provider>
      <div className={`${geistSans.variable} ${geistMono.variable} antialiased`}>
        <Component {...pageProps} />
      </div>
    </Web3Provider>
  );
}
"""

PAGES_INDEX_TEMPLATE = (
    """import Head from 'next/head';
import { ConnectButton } from '@rainbow-me/rainbowkit';

export default function Home() {
  return (
    <>
      <Head>
        <title>{{ name|title }}</title>
      </Head>
"""
    + PAGE_BODY
    + """    </>
  );
}
"""
)


WEB3_CONFIG_FILES = TemplateFileSet(
    "web3",
    {
        "src/wagmi.ts": WAGMI_TEMPLATE,
        "src/lib/fonts.ts": FONTS_TEMPLATE,
        "src/ABI/demo.json": (json.dumps(DEMO_ABI, indent=2) + "\n").encode("utf-8"),
    },
)

APP_ROUTER_FILES = TemplateFileSet(
    "app-router",
    {
        "src/app/providers.tsx": PROVIDER_TEMPLATE,
        "src/app/layout.tsx": APP_LAYOUT_TEMPLATE,
        "src/app/page.tsx": APP_PAGE_TEMPLATE,
    },
)

PAGES_ROUTER_FILES = TemplateFileSet(
    "pages-router",
    {
        "src/providers/Web3Provider.tsx": PROVIDER_TEMPLATE,
        "src/pages/_app.tsx": PAGES_APP_TEMPLATE,
        "src/pages/index.tsx": PAGES_INDEX_TEMPLATE,
    },
)


def file_set_for(router_style: RouterStyle) -> TemplateFileSet:
    """Return every file written for ``router_style``, Web3 config included."""

    router_files = APP_ROUTER_FILES if router_style is RouterStyle.APP else PAGES_ROUTER_FILES
    return WEB3_CONFIG_FILES.merged(router_files)
